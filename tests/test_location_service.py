# tests/test_location_service.py

"""
Tests for location ping updates.
"""

import pytest

from nearby_news.core.exceptions import MissingParameterError
from nearby_news.services.location_service import LocationService


class TestLocationService:
    """Test cases for LocationService."""

    @pytest.mark.asyncio
    async def test_update_location(self, location_repository, clock, fixed_now):
        service = LocationService(location_repository, clock=clock)

        ping = await service.update_location({"latitude": 40.0, "longitude": -74.0})

        assert ping.id
        assert ping.location.latitude == 40.0
        assert ping.updated_at == fixed_now

    @pytest.mark.asyncio
    async def test_same_device_replaces_previous_ping(self, location_repository):
        service = LocationService(location_repository)

        first = await service.update_location({"latitude": 1, "longitude": 1, "deviceId": "phone"})
        second = await service.update_location({"latitude": 2, "longitude": 2, "deviceId": "phone"})

        assert first.id == second.id
        assert second.location.latitude == 2
        assert await location_repository.count_pings() == 1

    @pytest.mark.asyncio
    async def test_anonymous_pings_are_appended(self, location_repository):
        service = LocationService(location_repository)

        await service.update_location({"latitude": 1, "longitude": 1})
        await service.update_location({"latitude": 1, "longitude": 1})

        assert await location_repository.count_pings() == 2

    @pytest.mark.asyncio
    async def test_invalid_update_stores_nothing(self, location_repository):
        service = LocationService(location_repository)

        with pytest.raises(MissingParameterError):
            await service.update_location({"latitude": 1})

        assert await location_repository.count_pings() == 0
