# schemas/location_schemas.py

"""
Location ping schemas.
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from .news_schemas import GeoPoint


class LocationPing(BaseModel):
    """Last known position reported by a device"""

    id: Optional[str] = None
    device_id: Optional[str] = Field(
        None, description="Device key; pings with a key replace the previous one"
    )
    location: GeoPoint
    updated_at: datetime


class LocationUpdateRequest(BaseModel):
    """Location update after validation"""

    location: GeoPoint
    device_id: Optional[str] = None


class LocationPingResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    latitude: float
    longitude: float
    updated_at: datetime = Field(..., alias="updatedAt")

    @classmethod
    def from_ping(cls, ping: LocationPing) -> "LocationPingResponse":
        return cls(
            latitude=ping.location.latitude,
            longitude=ping.location.longitude,
            updated_at=ping.updated_at,
        )


class LocationUpdateResponse(BaseModel):
    success: bool = True
    message: str = "Location received successfully"
    data: LocationPingResponse
