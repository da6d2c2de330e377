# utils/validation.py

"""
Request validation shared by the create, query and location paths.

Every function here is pure: it either returns a fully validated request
object or raises the first failing ValidationError. Checks run in a fixed
priority order so the same invalid request always fails with the same kind.
Values coming from query strings or form fields are coerced with the same
rules as native numbers.
"""

import math
import re
from typing import Any, Mapping, Optional

from ..core.exceptions import (
    ContentEmptyError,
    ContentTooLongError,
    InvalidTypeError,
    LatitudeOutOfRangeError,
    LongitudeOutOfRangeError,
    MissingParameterError,
    PaginationOutOfRangeError,
    RadiusOutOfRangeError,
)
from ..schemas.location_schemas import LocationUpdateRequest
from ..schemas.news_schemas import (
    GeoPoint,
    ImageUpload,
    NearbyQuery,
    NewsCreateRequest,
    SortKey,
)
from .geo_utils import MAX_LATITUDE, MAX_LONGITUDE, MIN_LATITUDE, MIN_LONGITUDE

DEFAULT_MAX_RADIUS_METERS = 50000.0
DEFAULT_PAGE = 1
DEFAULT_PAGE_LIMIT = 10
DEFAULT_MAX_PAGE_LIMIT = 100
DEFAULT_MAX_CONTENT_LENGTH = 500

# Plain decimal numbers with an optional exponent, as sent in query strings and forms
NUMBER_PATTERN = re.compile(r"[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")

# Accepted spellings of the sort parameter; anything else sorts by distance
SORT_ALIASES = {
    "distance": SortKey.DISTANCE,
    "recency": SortKey.RECENCY,
    "time": SortKey.RECENCY,
    "latest": SortKey.RECENCY,
}


def is_missing(value: Any) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())


def coerce_number(value: Any, field: str) -> float:
    """
    Convert a wire value to a finite float.

    Raises:
        InvalidTypeError: for booleans, non-numeric strings, NaN, infinities
            and integers too large for a float
    """
    if isinstance(value, bool):
        raise InvalidTypeError(f"{field} must be a number", field=field)

    if isinstance(value, str):
        value = value.strip()
        if not NUMBER_PATTERN.fullmatch(value):
            raise InvalidTypeError(f"{field} must be a number", field=field)
    elif not isinstance(value, (int, float)):
        raise InvalidTypeError(f"{field} must be a number", field=field)

    try:
        number = float(value)
    except (ValueError, OverflowError):
        raise InvalidTypeError(f"{field} must be a number", field=field)

    if not math.isfinite(number):
        raise InvalidTypeError(f"{field} must be a finite number", field=field)
    return number


def coerce_integer(value: Any, field: str) -> int:
    number = coerce_number(value, field)
    if not number.is_integer():
        raise InvalidTypeError(f"{field} must be an integer", field=field)
    return int(number)


def parse_sort(value: Any) -> SortKey:
    """Resolve the sort parameter, falling back to distance."""
    if not isinstance(value, str):
        return SortKey.DISTANCE
    return SORT_ALIASES.get(value.strip().lower(), SortKey.DISTANCE)


def _require(fields: Mapping[str, Any], *names: str) -> None:
    for name in names:
        if is_missing(fields.get(name)):
            raise MissingParameterError(f"{name} is required", field=name)


def check_latitude(latitude: float, field: str = "latitude") -> None:
    if latitude < MIN_LATITUDE or latitude > MAX_LATITUDE:
        raise LatitudeOutOfRangeError(
            f"{field} must be between -90 and 90", field=field
        )


def check_longitude(longitude: float, field: str = "longitude") -> None:
    if longitude < MIN_LONGITUDE or longitude > MAX_LONGITUDE:
        raise LongitudeOutOfRangeError(
            f"{field} must be between -180 and 180", field=field
        )


def validate_nearby_query(
    params: Mapping[str, Any],
    max_radius_meters: float = DEFAULT_MAX_RADIUS_METERS,
    default_limit: int = DEFAULT_PAGE_LIMIT,
    max_limit: int = DEFAULT_MAX_PAGE_LIMIT,
) -> NearbyQuery:
    """
    Validate raw nearby-query parameters.

    Args:
        params: Mapping with ``lat``, ``lng``, ``radius`` and optional
            ``sort``, ``page`` and ``limit``
        max_radius_meters: Largest accepted radius
        default_limit: Page size when ``limit`` is absent
        max_limit: Largest accepted page size

    Returns:
        NearbyQuery: Validated query

    Raises:
        ValidationError: First failing check in priority order
    """
    # 1. presence
    _require(params, "lat", "lng", "radius")

    # 2. types
    latitude = coerce_number(params["lat"], "lat")
    longitude = coerce_number(params["lng"], "lng")
    radius = coerce_number(params["radius"], "radius")
    raw_page = params.get("page")
    raw_limit = params.get("limit")
    page = DEFAULT_PAGE if is_missing(raw_page) else coerce_integer(raw_page, "page")
    limit = (
        default_limit if is_missing(raw_limit) else coerce_integer(raw_limit, "limit")
    )

    # 3-5. ranges
    check_latitude(latitude, "lat")
    check_longitude(longitude, "lng")
    if radius <= 0 or radius > max_radius_meters:
        raise RadiusOutOfRangeError(
            f"radius must be greater than 0 and at most {max_radius_meters:g} meters",
            field="radius",
        )

    # 6. pagination
    if page < 1:
        raise PaginationOutOfRangeError("page must be at least 1", field="page")
    if limit < 1 or limit > max_limit:
        raise PaginationOutOfRangeError(
            f"limit must be between 1 and {max_limit}", field="limit"
        )

    return NearbyQuery(
        point=GeoPoint(latitude=latitude, longitude=longitude),
        radius_meters=radius,
        sort=parse_sort(params.get("sort")),
        page=page,
        limit=limit,
    )


def validate_coordinates(fields: Mapping[str, Any]) -> GeoPoint:
    """Validate ``latitude``/``longitude`` fields of a create or ping body."""
    _require(fields, "latitude", "longitude")
    latitude = coerce_number(fields["latitude"], "latitude")
    longitude = coerce_number(fields["longitude"], "longitude")
    check_latitude(latitude)
    check_longitude(longitude)
    return GeoPoint(latitude=latitude, longitude=longitude)


def validate_news_input(
    fields: Mapping[str, Any],
    image: Optional[ImageUpload] = None,
    max_content_length: int = DEFAULT_MAX_CONTENT_LENGTH,
) -> NewsCreateRequest:
    """
    Validate a create-news request.

    Content is checked first, then the location with the same rules as the
    query path, then the content length.
    """
    content = fields.get("content")
    if is_missing(content):
        raise ContentEmptyError("Content is required", field="content")
    if not isinstance(content, str):
        raise InvalidTypeError("content must be a string", field="content")

    location = validate_coordinates(fields)

    content = content.strip()
    if len(content) > max_content_length:
        raise ContentTooLongError(
            f"content must be at most {max_content_length} characters",
            field="content",
        )

    return NewsCreateRequest(content=content, location=location, image=image)


def validate_location_update(fields: Mapping[str, Any]) -> LocationUpdateRequest:
    location = validate_coordinates(fields)
    device_id = fields.get("deviceId", fields.get("device_id"))
    if is_missing(device_id):
        device_id = None
    else:
        device_id = str(device_id).strip()
    return LocationUpdateRequest(location=location, device_id=device_id)
