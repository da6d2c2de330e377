# models/__init__.py

"""
Data models for MongoDB documents.
"""

from .news_model import GeoJSONPoint, LocationPingModel, NewsModel

__all__ = [
    "GeoJSONPoint",
    "NewsModel",
    "LocationPingModel",
]
