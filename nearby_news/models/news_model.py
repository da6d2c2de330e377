# models/news_model.py

"""
MongoDB document models for news items and location pings.
"""

from typing import List, Literal, Optional
from datetime import datetime
from pydantic import BaseModel, ConfigDict, Field, field_validator
from bson import ObjectId

from ..core.retention import ensure_utc
from ..schemas.location_schemas import LocationPing
from ..schemas.news_schemas import GeoPoint, NewsItem


class GeoJSONPoint(BaseModel):
    """GeoJSON point, coordinates ordered [longitude, latitude]"""

    type: Literal["Point"] = "Point"
    coordinates: List[float] = Field(..., min_length=2, max_length=2)

    @classmethod
    def from_geo_point(cls, point: GeoPoint) -> "GeoJSONPoint":
        return cls(coordinates=[point.longitude, point.latitude])

    def to_geo_point(self) -> GeoPoint:
        longitude, latitude = self.coordinates
        return GeoPoint(latitude=latitude, longitude=longitude)


class NewsModel(BaseModel):
    """MongoDB model for news items"""

    model_config = ConfigDict(populate_by_name=True, arbitrary_types_allowed=True)

    id: Optional[str] = Field(default=None, alias="_id")
    content: str = Field(..., description="News text")
    location: GeoJSONPoint = Field(..., description="Item location")
    image_ref: Optional[str] = Field(None, description="Stored image reference")
    created_at: datetime = Field(..., description="Creation timestamp, TTL key")

    @field_validator("id", mode="before")
    @classmethod
    def validate_object_id(cls, v):
        """Convert ObjectId to string"""
        if isinstance(v, ObjectId):
            return str(v)
        return v

    @classmethod
    def from_news_item(cls, news_item: NewsItem) -> "NewsModel":
        return cls(
            content=news_item.content,
            location=GeoJSONPoint.from_geo_point(news_item.location),
            image_ref=news_item.image_ref,
            created_at=news_item.created_at,
        )

    def to_document(self) -> dict:
        """Document for insertion, ``_id`` is left to MongoDB"""
        return self.model_dump(by_alias=True, exclude={"id"})

    def to_news_item(self) -> NewsItem:
        return NewsItem(
            id=self.id,
            content=self.content,
            location=self.location.to_geo_point(),
            image_ref=self.image_ref,
            created_at=ensure_utc(self.created_at),
        )


class LocationPingModel(BaseModel):
    """MongoDB model for location pings"""

    model_config = ConfigDict(populate_by_name=True, arbitrary_types_allowed=True)

    id: Optional[str] = Field(default=None, alias="_id")
    device_id: Optional[str] = None
    location: GeoJSONPoint
    updated_at: datetime

    @field_validator("id", mode="before")
    @classmethod
    def validate_object_id(cls, v):
        if isinstance(v, ObjectId):
            return str(v)
        return v

    @classmethod
    def from_ping(cls, ping: LocationPing) -> "LocationPingModel":
        return cls(
            device_id=ping.device_id,
            location=GeoJSONPoint.from_geo_point(ping.location),
            updated_at=ping.updated_at,
        )

    def to_document(self) -> dict:
        return self.model_dump(by_alias=True, exclude={"id"})

    def to_ping(self) -> LocationPing:
        return LocationPing(
            id=self.id,
            device_id=self.device_id,
            location=self.location.to_geo_point(),
            updated_at=ensure_utc(self.updated_at),
        )
