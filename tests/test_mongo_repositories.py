# tests/test_mongo_repositories.py

"""
Tests for the MongoDB repositories with mocked Motor collections.
"""

from datetime import timedelta
from unittest.mock import AsyncMock, MagicMock

import pytest
from bson import ObjectId
from pymongo import GEOSPHERE
from pymongo.errors import PyMongoError, ServerSelectionTimeoutError

from nearby_news.core.exceptions import StorageFailureError
from nearby_news.repositories.mongo_location_repository import MongoLocationRepository
from nearby_news.repositories.mongo_news_repository import (
    GEO_NEAR_SLACK_METERS,
    MongoNewsRepository,
)
from nearby_news.schemas.location_schemas import LocationPing
from nearby_news.schemas.news_schemas import GeoPoint

from .conftest import FIXED_NOW, make_item

MONGO_URL = "mongodb://localhost:27017"


def news_document(content, latitude, longitude, age=timedelta(0)):
    return {
        "_id": ObjectId(),
        "content": content,
        "location": {"type": "Point", "coordinates": [longitude, latitude]},
        "image_ref": None,
        "created_at": FIXED_NOW - age,
    }


@pytest.fixture
def news_repo():
    repo = MongoNewsRepository(MONGO_URL, ttl_seconds=604800)
    repo.collection = MagicMock()
    return repo


@pytest.fixture
def location_repo():
    repo = MongoLocationRepository(MONGO_URL, ttl_seconds=604800)
    repo.collection = MagicMock()
    return repo


class TestMongoNewsRepository:
    """Test cases for MongoNewsRepository."""

    @pytest.mark.asyncio
    async def test_initialize_creates_geo_and_ttl_indexes(self, news_repo):
        news_repo.collection.create_index = AsyncMock()

        await news_repo.initialize()

        calls = news_repo.collection.create_index.await_args_list
        assert calls[0].args[0] == [("location", GEOSPHERE)]
        assert calls[1].args[0] == [("created_at", 1)]
        assert calls[1].kwargs["expireAfterSeconds"] == 604800

    @pytest.mark.asyncio
    async def test_initialize_failure(self, news_repo):
        news_repo.collection.create_index = AsyncMock(
            side_effect=ServerSelectionTimeoutError("no server")
        )

        with pytest.raises(StorageFailureError):
            await news_repo.initialize()

    @pytest.mark.asyncio
    async def test_save_stores_geojson(self, news_repo):
        inserted_id = ObjectId()
        news_repo.collection.insert_one = AsyncMock(
            return_value=MagicMock(inserted_id=inserted_id)
        )

        stored = await news_repo.save_news_item(make_item("hello", 40.0, -74.0))

        doc = news_repo.collection.insert_one.await_args.args[0]
        assert doc["location"] == {"type": "Point", "coordinates": [-74.0, 40.0]}
        assert doc["created_at"] == FIXED_NOW
        assert "_id" not in doc
        assert stored.id == str(inserted_id)

    @pytest.mark.asyncio
    async def test_save_failure(self, news_repo):
        news_repo.collection.insert_one = AsyncMock(side_effect=PyMongoError("boom"))

        with pytest.raises(StorageFailureError):
            await news_repo.save_news_item(make_item())

    def test_geo_near_pipeline(self, news_repo):
        cutoff = FIXED_NOW - timedelta(days=7)

        pipeline = news_repo._build_geo_near_pipeline(
            GeoPoint(latitude=40.001, longitude=-74.001), 500, cutoff
        )

        geo_near = pipeline[0]["$geoNear"]
        assert geo_near["near"] == {"type": "Point", "coordinates": [-74.001, 40.001]}
        assert geo_near["maxDistance"] == 500 + GEO_NEAR_SLACK_METERS
        assert geo_near["spherical"] is True
        assert geo_near["query"] == {"created_at": {"$gt": cutoff}}

    @pytest.mark.asyncio
    async def test_find_within_radius_rechecks_distance(self, news_repo):
        cursor = MagicMock()
        cursor.to_list = AsyncMock(
            return_value=[
                {**news_document("inside", 40.0, -74.0), "distance_meters": 140.2},
                # Inside MongoDB's slack but outside the requested radius
                {**news_document("edge", 40.0 + 500.5 / 111319.49, -74.0), "distance_meters": 500.5},
            ]
        )
        news_repo.collection.aggregate = MagicMock(return_value=cursor)

        candidates = await news_repo.find_within_radius(
            GeoPoint(latitude=40.0, longitude=-74.0), 500
        )

        assert [c.item.content for c in candidates] == ["inside"]
        assert candidates[0].distance_meters == pytest.approx(0.0)
        assert candidates[0].item.location == GeoPoint(latitude=40.0, longitude=-74.0)

    @pytest.mark.asyncio
    async def test_find_within_radius_failure(self, news_repo):
        cursor = MagicMock()
        cursor.to_list = AsyncMock(side_effect=PyMongoError("boom"))
        news_repo.collection.aggregate = MagicMock(return_value=cursor)

        with pytest.raises(StorageFailureError):
            await news_repo.find_within_radius(GeoPoint(latitude=0, longitude=0), 10)

    @pytest.mark.asyncio
    async def test_count_live_news(self, news_repo):
        cutoff = FIXED_NOW - timedelta(days=7)
        news_repo.collection.count_documents = AsyncMock(return_value=4)

        assert await news_repo.count_news(created_after=cutoff) == 4
        news_repo.collection.count_documents.assert_awaited_once_with(
            {"created_at": {"$gt": cutoff}}
        )

    @pytest.mark.asyncio
    async def test_delete_expired(self, news_repo):
        cutoff = FIXED_NOW - timedelta(days=7)
        news_repo.collection.delete_many = AsyncMock(return_value=MagicMock(deleted_count=3))

        assert await news_repo.delete_expired(cutoff) == 3
        news_repo.collection.delete_many.assert_awaited_once_with(
            {"created_at": {"$lte": cutoff}}
        )

    @pytest.mark.asyncio
    async def test_health_check_failure(self, news_repo):
        news_repo.client = MagicMock()
        news_repo.client.admin.command = AsyncMock(
            side_effect=ServerSelectionTimeoutError("no server")
        )

        assert await news_repo.health_check() is False


class TestMongoLocationRepository:
    """Test cases for MongoLocationRepository."""

    @pytest.mark.asyncio
    async def test_keyed_ping_is_upserted(self, location_repo):
        stored_id = ObjectId()
        location_repo.collection.find_one_and_replace = AsyncMock(
            return_value={"_id": stored_id}
        )
        ping = LocationPing(
            device_id="phone", location=GeoPoint(latitude=1, longitude=2), updated_at=FIXED_NOW
        )

        stored = await location_repo.save_ping(ping)

        args, kwargs = location_repo.collection.find_one_and_replace.await_args
        assert args[0] == {"device_id": "phone"}
        assert args[1]["location"]["coordinates"] == [2, 1]
        assert kwargs["upsert"] is True
        assert stored.id == str(stored_id)

    @pytest.mark.asyncio
    async def test_anonymous_ping_is_inserted(self, location_repo):
        location_repo.collection.insert_one = AsyncMock(
            return_value=MagicMock(inserted_id=ObjectId())
        )
        location_repo.collection.find_one_and_replace = AsyncMock()
        ping = LocationPing(location=GeoPoint(latitude=1, longitude=2), updated_at=FIXED_NOW)

        await location_repo.save_ping(ping)

        location_repo.collection.insert_one.assert_awaited_once()
        location_repo.collection.find_one_and_replace.assert_not_called()

    @pytest.mark.asyncio
    async def test_save_failure(self, location_repo):
        location_repo.collection.insert_one = AsyncMock(side_effect=PyMongoError("boom"))
        ping = LocationPing(location=GeoPoint(latitude=1, longitude=2), updated_at=FIXED_NOW)

        with pytest.raises(StorageFailureError):
            await location_repo.save_ping(ping)
