# interfaces/__init__.py

"""
Interface definitions for the nearby news service.
"""

from .image_store import ImageStore
from .location_repository_interface import LocationRepositoryInterface
from .news_repository_interface import NewsRepositoryInterface
from .spatial_index import SpatialIndex

__all__ = [
    "SpatialIndex",
    "NewsRepositoryInterface",
    "LocationRepositoryInterface",
    "ImageStore",
]
