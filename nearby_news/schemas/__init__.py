# schemas/__init__.py

"""
API schemas for request/response DTOs.
"""

from .common_schemas import ErrorResponseSchema, HealthCheckSchema
from .location_schemas import (
    LocationPing,
    LocationPingResponse,
    LocationUpdateRequest,
    LocationUpdateResponse,
)
from .news_schemas import (
    GeoPoint,
    ImageUpload,
    NearbyNewsResponse,
    NearbyNewsResult,
    NearbyQuery,
    NewsCreateRequest,
    NewsCreateResponse,
    NewsItem,
    NewsItemResponse,
    ProximityCandidate,
    SortKey,
)

__all__ = [
    "HealthCheckSchema",
    "ErrorResponseSchema",
    "GeoPoint",
    "ImageUpload",
    "NewsItem",
    "ProximityCandidate",
    "NewsCreateRequest",
    "NearbyQuery",
    "NearbyNewsResult",
    "NewsItemResponse",
    "NewsCreateResponse",
    "NearbyNewsResponse",
    "SortKey",
    "LocationPing",
    "LocationUpdateRequest",
    "LocationPingResponse",
    "LocationUpdateResponse",
]
