# routers/location_router.py

from fastapi import APIRouter, Depends, Request

from ..core.exceptions import InvalidTypeError
from ..schemas.location_schemas import LocationPingResponse, LocationUpdateResponse
from ..services.location_service import LocationService
from ..utils.dependencies import get_location_service

router = APIRouter(prefix="/location", tags=["location"])


@router.post("", response_model=LocationUpdateResponse)
@router.post("/update", response_model=LocationUpdateResponse)
async def update_location(
    request: Request,
    location_service: LocationService = Depends(get_location_service),
) -> LocationUpdateResponse:
    """Record the caller's current position (``latitude``, ``longitude``, optional ``deviceId``)."""
    try:
        body = await request.json()
    except ValueError:
        raise InvalidTypeError("Request body must be a JSON object")
    if not isinstance(body, dict):
        raise InvalidTypeError("Request body must be a JSON object")

    ping = await location_service.update_location(body)
    return LocationUpdateResponse(data=LocationPingResponse.from_ping(ping))
