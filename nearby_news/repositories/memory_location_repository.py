# repositories/memory_location_repository.py

"""
In-process store for location pings.
"""

import uuid
from datetime import datetime
from typing import Dict

from ..core.retention import ensure_utc
from ..interfaces.location_repository_interface import LocationRepositoryInterface
from ..schemas.location_schemas import LocationPing


class InMemoryLocationRepository(LocationRepositoryInterface):
    """Location repository keeping pings in memory"""

    def __init__(self):
        self._pings: Dict[str, LocationPing] = {}
        self._by_device: Dict[str, str] = {}

    async def save_ping(self, ping: LocationPing) -> LocationPing:
        ping_id = self._by_device.get(ping.device_id) if ping.device_id else None
        stored = ping.model_copy(update={"id": ping_id or uuid.uuid4().hex})
        self._pings[stored.id] = stored
        if stored.device_id:
            self._by_device[stored.device_id] = stored.id
        return stored

    async def delete_expired(self, cutoff: datetime) -> int:
        expired = [
            ping
            for ping in self._pings.values()
            if ensure_utc(ping.updated_at) <= cutoff
        ]
        for ping in expired:
            del self._pings[ping.id]
            if ping.device_id and self._by_device.get(ping.device_id) == ping.id:
                del self._by_device[ping.device_id]
        return len(expired)

    async def count_pings(self) -> int:
        return len(self._pings)
