# tests/test_proximity_query_service.py

"""
Tests for the proximity query engine.
"""

from datetime import timedelta
from unittest.mock import AsyncMock

import pytest

from nearby_news.core.exceptions import (
    LatitudeOutOfRangeError,
    RadiusOutOfRangeError,
    StorageFailureError,
)
from nearby_news.interfaces.news_repository_interface import NewsRepositoryInterface
from nearby_news.schemas.news_schemas import ProximityCandidate
from nearby_news.services.proximity_query_service import ProximityQueryService

from .conftest import make_item

# Degrees of latitude per metre on the service's sphere
DEG_PER_METER = 1 / 111319.49


@pytest.fixture
def service(news_repository, retention_policy, clock):
    return ProximityQueryService(
        repository=news_repository, retention_policy=retention_policy, clock=clock
    )


class TestProximityQueryService:
    """Test cases for ProximityQueryService."""

    @pytest.mark.asyncio
    async def test_single_item_scenario(self, service, news_repository):
        """Item at (40, -74) found from (40.001, -74.001) about 0.14 km away."""
        await news_repository.save_news_item(make_item("hello", 40.0, -74.0))

        result = await service.execute(
            {"lat": 40.001, "lng": -74.001, "radius": 500, "sort": "distance", "page": 1, "limit": 10}
        )

        assert result.total_matches == 1
        assert result.total_pages == 1
        assert result.items[0].item.content == "hello"
        assert result.items[0].distance_meters / 1000 == pytest.approx(0.14, abs=0.005)

    @pytest.mark.asyncio
    async def test_radius_too_large_never_queries_store(self, retention_policy, clock):
        repository = AsyncMock(spec=NewsRepositoryInterface)
        service = ProximityQueryService(repository, retention_policy, clock=clock)

        with pytest.raises(RadiusOutOfRangeError):
            await service.execute({"lat": 40.0, "lng": -74.0, "radius": 100000})

        repository.find_within_radius.assert_not_called()

    @pytest.mark.asyncio
    async def test_first_failing_check_wins(self, service):
        with pytest.raises(LatitudeOutOfRangeError):
            await service.execute({"lat": 999, "lng": 0, "radius": -1})

    @pytest.mark.asyncio
    async def test_sorted_by_distance(self, service, news_repository):
        await news_repository.save_news_item(
            make_item("800m", 40.0 + 800 * DEG_PER_METER, -74.0)
        )
        await news_repository.save_news_item(
            make_item("200m", 40.0 + 200 * DEG_PER_METER, -74.0)
        )

        result = await service.execute(
            {"lat": 40.0, "lng": -74.0, "radius": 1000, "sort": "distance"}
        )

        assert [c.item.content for c in result.items] == ["200m", "800m"]
        assert result.items[0].distance_meters == pytest.approx(200, abs=1)
        assert result.items[1].distance_meters == pytest.approx(800, abs=1)

    @pytest.mark.asyncio
    async def test_sorted_by_time(self, service, news_repository):
        await news_repository.save_news_item(
            make_item("older", 40.0 + 100 * DEG_PER_METER, -74.0, age=timedelta(hours=2))
        )
        await news_repository.save_news_item(
            make_item("newer", 40.0 + 900 * DEG_PER_METER, -74.0, age=timedelta(hours=1))
        )

        result = await service.execute(
            {"lat": 40.0, "lng": -74.0, "radius": 1000, "sort": "time"}
        )

        assert [c.item.content for c in result.items] == ["newer", "older"]

    @pytest.mark.asyncio
    async def test_expired_items_excluded(self, service, news_repository):
        for days in (6, 7, 8):
            await news_repository.save_news_item(
                make_item(f"{days}d", age=timedelta(days=days))
            )

        result = await service.execute({"lat": 40.0, "lng": -74.0, "radius": 100})

        assert [c.item.content for c in result.items] == ["6d"]
        assert result.total_matches == 1

    @pytest.mark.asyncio
    async def test_expired_candidates_filtered_even_if_store_returns_them(
        self, retention_policy, clock
    ):
        repository = AsyncMock(spec=NewsRepositoryInterface)
        stale = make_item("stale", age=timedelta(days=10)).model_copy(update={"id": "1"})
        fresh = make_item("fresh").model_copy(update={"id": "2"})
        repository.find_within_radius.return_value = [
            ProximityCandidate(item=stale, distance_meters=5),
            ProximityCandidate(item=fresh, distance_meters=10),
        ]
        service = ProximityQueryService(repository, retention_policy, clock=clock)

        result = await service.execute({"lat": 40.0, "lng": -74.0, "radius": 100})

        assert [c.item.content for c in result.items] == ["fresh"]
        _, kwargs = repository.find_within_radius.call_args
        assert kwargs["created_after"] == retention_policy.cutoff(clock())

    @pytest.mark.asyncio
    async def test_pages_concatenate_to_full_ranking(self, service, news_repository):
        for i in range(23):
            await news_repository.save_news_item(
                make_item(f"item-{i}", 40.0 + (i % 7) * 50 * DEG_PER_METER, -74.0, age=timedelta(minutes=i % 3))
            )
        params = {"lat": 40.0, "lng": -74.0, "radius": 1000}

        full = await service.execute({**params, "limit": 100})
        pages = []
        for page in range(1, 4):
            result = await service.execute({**params, "page": page, "limit": 10})
            assert result.total_matches == 23
            assert result.total_pages == 3
            pages.extend(c.item.id for c in result.items)

        assert pages == [c.item.id for c in full.items]

    @pytest.mark.asyncio
    async def test_identical_queries_are_stable(self, service, news_repository):
        for i in range(5):
            await news_repository.save_news_item(make_item(f"same-{i}"))
        params = {"lat": 40.0, "lng": -74.0, "radius": 10}

        first = await service.execute(params)
        second = await service.execute(params)

        assert [c.item.id for c in first.items] == [c.item.id for c in second.items]

    @pytest.mark.asyncio
    async def test_no_matches(self, service):
        result = await service.execute({"lat": 0, "lng": 0, "radius": 50000})

        assert result.items == []
        assert result.total_matches == 0
        assert result.total_pages == 0

    @pytest.mark.asyncio
    async def test_page_beyond_results(self, service, news_repository):
        await news_repository.save_news_item(make_item())

        result = await service.execute({"lat": 40.0, "lng": -74.0, "radius": 10, "page": 5})

        assert result.items == []
        assert result.total_matches == 1
        assert result.page == 5

    @pytest.mark.asyncio
    async def test_storage_failure_propagates(self, retention_policy, clock):
        repository = AsyncMock(spec=NewsRepositoryInterface)
        repository.find_within_radius.side_effect = StorageFailureError("down")
        service = ProximityQueryService(repository, retention_policy, clock=clock)

        with pytest.raises(StorageFailureError):
            await service.execute({"lat": 40.0, "lng": -74.0, "radius": 100})
