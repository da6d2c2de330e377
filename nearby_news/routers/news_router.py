# routers/news_router.py

from typing import Any, Dict, Optional, Tuple
from fastapi import APIRouter, Depends, Query, Request
from starlette.datastructures import UploadFile

from ..core.exceptions import InvalidTypeError
from ..schemas.news_schemas import (
    ImageUpload,
    NearbyNewsResponse,
    NewsCreateResponse,
    NewsItemResponse,
)
from ..services.news_service import NewsService
from ..services.proximity_query_service import ProximityQueryService
from ..utils.dependencies import get_news_service, get_proximity_query_service
from common.logger import LoggerFactory, LoggerType, LogLevel

# Initialize router
router = APIRouter(prefix="/news", tags=["news"])

# Setup logging
logger = LoggerFactory.get_logger(
    name="news-router",
    logger_type=LoggerType.STANDARD,
    level=LogLevel.INFO,
    file_level=LogLevel.DEBUG,
    log_file="logs/news_router.log",
)

CREATE_FIELDS = ("content", "latitude", "longitude")
FORM_CONTENT_TYPES = ("multipart/form-data", "application/x-www-form-urlencoded")


async def _read_create_payload(
    request: Request,
) -> Tuple[Dict[str, Any], Optional[ImageUpload]]:
    """Read create fields from a JSON body or a (multipart) form."""
    content_type = request.headers.get("content-type", "")

    if content_type.startswith(FORM_CONTENT_TYPES):
        form = await request.form()
        fields = {name: form.get(name) for name in CREATE_FIELDS}
        image = None
        upload = form.get("image")
        if isinstance(upload, UploadFile) and upload.filename:
            image = ImageUpload(
                filename=upload.filename,
                content_type=upload.content_type,
                data=await upload.read(),
            )
        return fields, image

    try:
        body = await request.json()
    except ValueError:
        raise InvalidTypeError("Request body must be a JSON object")
    if not isinstance(body, dict):
        raise InvalidTypeError("Request body must be a JSON object")
    return body, None


@router.post("", status_code=201, response_model=NewsCreateResponse)
@router.post("/create", status_code=201, response_model=NewsCreateResponse)
async def create_news(
    request: Request,
    news_service: NewsService = Depends(get_news_service),
) -> NewsCreateResponse:
    """
    Create a news item at a location

    Accepts JSON ``{content, latitude, longitude}`` or a multipart form with
    the same fields and an optional ``image`` file.
    """
    fields, image = await _read_create_payload(request)
    news_item = await news_service.create_news(fields, image=image)
    return NewsCreateResponse(data=NewsItemResponse.from_news_item(news_item))


@router.get("/nearby", response_model=NearbyNewsResponse)
async def get_nearby_news(
    lat: Optional[str] = Query(None, description="Latitude of the query point"),
    lng: Optional[str] = Query(None, description="Longitude of the query point"),
    radius: Optional[str] = Query(None, description="Search radius in meters"),
    sort: Optional[str] = Query(None, description="'distance' (default) or 'time'"),
    page: Optional[str] = Query(None, description="Page number, starting at 1"),
    limit: Optional[str] = Query(None, description="Items per page"),
    query_service: ProximityQueryService = Depends(get_proximity_query_service),
) -> NearbyNewsResponse:
    """
    Get news items near a point

    - **lat**, **lng**: query point
    - **radius**: search radius in meters (max 50 km)
    - **sort**: `distance` (nearest first) or `time` (newest first)
    - **page**, **limit**: pagination
    """
    params = {
        "lat": lat,
        "lng": lng,
        "radius": radius,
        "sort": sort,
        "page": page,
        "limit": limit,
    }
    result = await query_service.execute(params)
    return NearbyNewsResponse.from_result(result)
