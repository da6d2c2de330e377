# repositories/__init__.py

"""
Data access layer repositories.
"""

from .memory_location_repository import InMemoryLocationRepository
from .memory_news_repository import InMemoryNewsRepository
from .mongo_location_repository import MongoLocationRepository
from .mongo_news_repository import MongoNewsRepository

__all__ = [
    "InMemoryNewsRepository",
    "InMemoryLocationRepository",
    "MongoNewsRepository",
    "MongoLocationRepository",
]
