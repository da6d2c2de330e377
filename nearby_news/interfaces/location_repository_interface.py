# interfaces/location_repository_interface.py

from abc import ABC, abstractmethod
from datetime import datetime

from ..schemas.location_schemas import LocationPing


class LocationRepositoryInterface(ABC):
    """Abstract interface for device location pings"""

    async def initialize(self) -> None:
        return None

    @abstractmethod
    async def save_ping(self, ping: LocationPing) -> LocationPing:
        """
        Store a ping

        Pings carrying a ``device_id`` replace that device's previous ping,
        anonymous pings are appended.

        Returns:
            LocationPing: Stored ping with its ``id``
        """
        pass

    @abstractmethod
    async def delete_expired(self, cutoff: datetime) -> int:
        """Remove pings updated at or before ``cutoff``"""
        pass

    @abstractmethod
    async def count_pings(self) -> int:
        pass

    async def close(self) -> None:
        return None
