# utils/geo_utils.py

"""
Spherical geometry helpers.

Distances are great-circle distances on a sphere of radius
EARTH_RADIUS_METERS, the radius MongoDB uses for spherical queries, so the
in-memory index and the database agree on which items fall inside a radius.
"""

import math
from typing import Tuple

EARTH_RADIUS_METERS = 6378100.0

MIN_LATITUDE = -90.0
MAX_LATITUDE = 90.0
MIN_LONGITUDE = -180.0
MAX_LONGITUDE = 180.0


def haversine_distance(lat1: float, lng1: float, lat2: float, lng2: float) -> float:
    """
    Great-circle distance between two points in metres.

    Args:
        lat1: Latitude of the first point in degrees
        lng1: Longitude of the first point in degrees
        lat2: Latitude of the second point in degrees
        lng2: Longitude of the second point in degrees

    Returns:
        float: Distance in metres
    """
    phi1 = math.radians(lat1)
    phi2 = math.radians(lat2)
    d_phi = math.radians(lat2 - lat1)
    d_lambda = math.radians(lng2 - lng1)

    a = (
        math.sin(d_phi / 2) ** 2
        + math.cos(phi1) * math.cos(phi2) * math.sin(d_lambda / 2) ** 2
    )
    # Rounding can push a slightly above 1 for antipodal points
    a = min(1.0, max(0.0, a))
    return 2 * EARTH_RADIUS_METERS * math.asin(math.sqrt(a))


def angular_radius_degrees(radius_meters: float) -> float:
    """Central angle in degrees covered by an arc of ``radius_meters``."""
    return math.degrees(radius_meters / EARTH_RADIUS_METERS)


def longitude_span_degrees(latitude: float, radius_meters: float) -> float:
    """
    Half-width in longitude of the spherical cap around a point.

    Returns 180 when the cap contains a pole, in which case every longitude
    has to be considered.
    """
    angular = radius_meters / EARTH_RADIUS_METERS
    phi = math.radians(latitude)
    if abs(phi) + angular >= math.pi / 2:
        return 180.0
    ratio = math.sin(angular) / math.cos(phi)
    if ratio >= 1.0:
        return 180.0
    return math.degrees(math.asin(ratio))


def latitude_bounds(latitude: float, radius_meters: float) -> Tuple[float, float]:
    """Latitude range of the spherical cap, clamped to the poles."""
    span = angular_radius_degrees(radius_meters)
    return max(MIN_LATITUDE, latitude - span), min(MAX_LATITUDE, latitude + span)


def normalize_longitude(longitude: float) -> float:
    """Wrap a longitude into [-180, 180)."""
    return ((longitude + 180.0) % 360.0) - 180.0


def meters_to_kilometers(distance_meters: float, precision: int = 3) -> float:
    return round(distance_meters / 1000.0, precision)
