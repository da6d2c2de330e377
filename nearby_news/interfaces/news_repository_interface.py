# interfaces/news_repository_interface.py

from abc import ABC, abstractmethod
from datetime import datetime
from typing import List, Optional

from ..schemas.news_schemas import GeoPoint, NewsItem, ProximityCandidate


class NewsRepositoryInterface(ABC):
    """Abstract interface for news item storage and proximity lookups"""

    async def initialize(self) -> None:
        """Prepare indexes or other resources before first use"""
        return None

    @abstractmethod
    async def save_news_item(self, news_item: NewsItem) -> NewsItem:
        """
        Persist a new news item

        Args:
            news_item: Item without ``id``; ``created_at`` must be set

        Returns:
            NewsItem: Stored item carrying its assigned ``id``

        Raises:
            StorageFailureError: When the store cannot persist the item
        """
        pass

    @abstractmethod
    async def find_within_radius(
        self,
        point: GeoPoint,
        radius_meters: float,
        created_after: Optional[datetime] = None,
    ) -> List[ProximityCandidate]:
        """
        Find items within a great-circle radius of a point

        Args:
            point: Query centre
            radius_meters: Radius in metres
            created_after: Only items created strictly after this instant

        Returns:
            List[ProximityCandidate]: Unordered matches with distances

        Raises:
            StorageFailureError: When the store or index fails
        """
        pass

    @abstractmethod
    async def delete_expired(self, cutoff: datetime) -> int:
        """
        Physically remove items created at or before ``cutoff``

        Returns:
            int: Number of removed items
        """
        pass

    @abstractmethod
    async def count_news(self, created_after: Optional[datetime] = None) -> int:
        """Count stored items, optionally only those created after an instant"""
        pass

    @abstractmethod
    async def health_check(self) -> bool:
        pass

    async def close(self) -> None:
        return None
