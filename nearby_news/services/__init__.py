# services/__init__.py

"""
Business logic services.
"""

from .location_service import LocationService
from .news_service import NewsService
from .proximity_query_service import ProximityQueryService
from .retention_service import RetentionScheduler, RetentionService

__all__ = [
    "NewsService",
    "ProximityQueryService",
    "LocationService",
    "RetentionService",
    "RetentionScheduler",
]
