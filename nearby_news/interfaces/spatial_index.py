# interfaces/spatial_index.py

"""
Spatial index interface for radius queries over point locations.
"""

from abc import ABC, abstractmethod
from typing import List, Tuple

from ..schemas.news_schemas import GeoPoint


class SpatialIndex(ABC):
    """Abstract base class for point indexes answering radius queries."""

    @abstractmethod
    def add(self, item_id: str, point: GeoPoint) -> None:
        """
        Index (or re-index) an item at a point.

        Args:
            item_id: Identifier of the stored item
            point: Item location
        """
        pass

    @abstractmethod
    def remove(self, item_id: str) -> bool:
        """
        Drop an item from the index.

        Returns:
            bool: True if the item was indexed
        """
        pass

    @abstractmethod
    def query(self, point: GeoPoint, radius_meters: float) -> List[Tuple[str, float]]:
        """
        Find every indexed item within ``radius_meters`` of ``point``.

        Args:
            point: Query centre
            radius_meters: Great-circle radius in metres

        Returns:
            List[Tuple[str, float]]: Unordered (item_id, distance_meters) pairs
        """
        pass

    @abstractmethod
    def __len__(self) -> int:
        pass

    def __contains__(self, item_id: str) -> bool:
        return False
