# schemas/news_schemas.py

"""
News-related schemas: domain records, validated requests and API responses.
"""

from datetime import datetime
from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

from ..utils.geo_utils import meters_to_kilometers


class SortKey(str, Enum):
    DISTANCE = "distance"
    RECENCY = "recency"


class GeoPoint(BaseModel):
    latitude: float = Field(..., ge=-90, le=90, description="Latitude in degrees")
    longitude: float = Field(
        ..., ge=-180, le=180, description="Longitude in degrees"
    )


class ImageUpload(BaseModel):
    """Raw image attached to a create request"""

    filename: Optional[str] = None
    content_type: Optional[str] = None
    data: bytes = b""


class NewsItem(BaseModel):
    """Persisted news item"""

    id: Optional[str] = Field(None, description="Store-assigned identifier")
    content: str = Field(..., min_length=1, description="News text")
    location: GeoPoint
    image_ref: Optional[str] = Field(None, description="Reference to stored image")
    created_at: datetime = Field(..., description="Creation timestamp (UTC)")


class ProximityCandidate(BaseModel):
    """Item found inside a query radius together with its distance"""

    item: NewsItem
    distance_meters: float = Field(..., ge=0)


class NewsCreateRequest(BaseModel):
    """Create request after validation"""

    content: str
    location: GeoPoint
    image: Optional[ImageUpload] = None


class NearbyQuery(BaseModel):
    """Proximity query after validation"""

    point: GeoPoint
    radius_meters: float = Field(..., gt=0)
    sort: SortKey = SortKey.DISTANCE
    page: int = Field(1, ge=1)
    limit: int = Field(10, ge=1)


class NearbyNewsResult(BaseModel):
    """One page of ranked proximity results"""

    items: List[ProximityCandidate] = Field(default_factory=list)
    total_matches: int = 0
    page: int = 1
    limit: int = 10
    total_pages: int = 0


# API response schemas


class LocationResponse(BaseModel):
    latitude: float
    longitude: float


class NewsItemResponse(BaseModel):
    """News item returned by the create endpoint"""

    model_config = ConfigDict(populate_by_name=True)

    id: str
    content: str
    location: LocationResponse
    image_ref: Optional[str] = Field(None, alias="imageRef")
    created_at: datetime = Field(..., alias="createdAt")

    @classmethod
    def from_news_item(cls, news_item: NewsItem) -> "NewsItemResponse":
        return cls(
            id=news_item.id,
            content=news_item.content,
            location=LocationResponse(
                latitude=news_item.location.latitude,
                longitude=news_item.location.longitude,
            ),
            image_ref=news_item.image_ref,
            created_at=news_item.created_at,
        )


class NewsCreateResponse(BaseModel):
    success: bool = True
    message: str = "News created successfully"
    data: NewsItemResponse


class NearbyNewsItemResponse(BaseModel):
    """Projection of a nearby item, without raw identifiers"""

    model_config = ConfigDict(populate_by_name=True)

    content: str
    distance_km: float = Field(..., alias="distanceKm")
    created_at: datetime = Field(..., alias="createdAt")
    image_ref: Optional[str] = Field(None, alias="imageRef")

    @classmethod
    def from_candidate(cls, candidate: ProximityCandidate) -> "NearbyNewsItemResponse":
        return cls(
            content=candidate.item.content,
            distance_km=meters_to_kilometers(candidate.distance_meters),
            created_at=candidate.item.created_at,
            image_ref=candidate.item.image_ref,
        )


class NearbyNewsResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    success: bool = True
    total_matches: int = Field(..., alias="totalMatches")
    page: int
    limit: int
    total_pages: int = Field(..., alias="totalPages")
    count: int
    data: List[NearbyNewsItemResponse] = Field(default_factory=list)

    @classmethod
    def from_result(cls, result: NearbyNewsResult) -> "NearbyNewsResponse":
        data = [NearbyNewsItemResponse.from_candidate(c) for c in result.items]
        return cls(
            total_matches=result.total_matches,
            page=result.page,
            limit=result.limit,
            total_pages=result.total_pages,
            count=len(data),
            data=data,
        )
