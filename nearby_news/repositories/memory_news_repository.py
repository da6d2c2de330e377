# repositories/memory_news_repository.py

"""
In-process news store backed by a dict and a geocell spatial index.
"""

import uuid
from datetime import datetime
from typing import Dict, List, Optional

from common.logger import LoggerFactory, LoggerType, LogLevel

from ..adapters.geocell_index import GeoCellIndex
from ..core.retention import ensure_utc
from ..interfaces.news_repository_interface import NewsRepositoryInterface
from ..interfaces.spatial_index import SpatialIndex
from ..schemas.news_schemas import GeoPoint, NewsItem, ProximityCandidate


class InMemoryNewsRepository(NewsRepositoryInterface):
    """
    News repository keeping items in memory.

    Every mutation updates the item map and the spatial index in the same
    synchronous step, so concurrent coroutines never observe one without the
    other.
    """

    def __init__(self, spatial_index: Optional[SpatialIndex] = None):
        self._items: Dict[str, NewsItem] = {}
        self._index: SpatialIndex = spatial_index or GeoCellIndex()
        self.logger = LoggerFactory.get_logger(
            name="memory-news-repository",
            logger_type=LoggerType.STANDARD,
            level=LogLevel.INFO,
        )

    @property
    def spatial_index(self) -> SpatialIndex:
        return self._index

    async def save_news_item(self, news_item: NewsItem) -> NewsItem:
        item_id = uuid.uuid4().hex
        stored = news_item.model_copy(update={"id": item_id})
        self._items[item_id] = stored
        self._index.add(item_id, stored.location)
        self.logger.debug(f"Saved news item {item_id}")
        return stored

    async def find_within_radius(
        self,
        point: GeoPoint,
        radius_meters: float,
        created_after: Optional[datetime] = None,
    ) -> List[ProximityCandidate]:
        candidates = []
        for item_id, distance in self._index.query(point, radius_meters):
            item = self._items[item_id]
            if created_after and ensure_utc(item.created_at) <= created_after:
                continue
            candidates.append(ProximityCandidate(item=item, distance_meters=distance))
        return candidates

    async def delete_expired(self, cutoff: datetime) -> int:
        expired = [
            item_id
            for item_id, item in self._items.items()
            if ensure_utc(item.created_at) <= cutoff
        ]
        for item_id in expired:
            del self._items[item_id]
            self._index.remove(item_id)
        if expired:
            self.logger.debug(f"Removed {len(expired)} expired news items")
        return len(expired)

    async def count_news(self, created_after: Optional[datetime] = None) -> int:
        if created_after is None:
            return len(self._items)
        return sum(
            1
            for item in self._items.values()
            if ensure_utc(item.created_at) > created_after
        )

    async def health_check(self) -> bool:
        return len(self._items) == len(self._index)
