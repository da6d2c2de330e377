# tests/conftest.py

"""
Shared fixtures. Settings are read at import time, so the test environment is
set before anything from ``nearby_news`` is imported.
"""

import os
import tempfile
from datetime import datetime, timedelta, timezone

os.environ.setdefault("STORAGE_BACKEND", "memory")
os.environ.setdefault("ENABLE_RETENTION_SWEEP", "false")
os.environ.setdefault("UPLOAD_DIR", tempfile.mkdtemp(prefix="nearby-news-uploads-"))

import pytest

from nearby_news.core.retention import RetentionPolicy
from nearby_news.repositories.memory_location_repository import (
    InMemoryLocationRepository,
)
from nearby_news.repositories.memory_news_repository import InMemoryNewsRepository
from nearby_news.schemas.news_schemas import GeoPoint, NewsItem
from nearby_news.utils.dependencies import container

FIXED_NOW = datetime(2024, 1, 15, 12, 0, tzinfo=timezone.utc)


def make_item(
    content: str = "hello",
    latitude: float = 40.0,
    longitude: float = -74.0,
    age: timedelta = timedelta(0),
    now: datetime = FIXED_NOW,
    image_ref=None,
) -> NewsItem:
    return NewsItem(
        content=content,
        location=GeoPoint(latitude=latitude, longitude=longitude),
        image_ref=image_ref,
        created_at=now - age,
    )


@pytest.fixture
def fixed_now():
    return FIXED_NOW


@pytest.fixture
def clock():
    return lambda: FIXED_NOW


@pytest.fixture
def retention_policy():
    return RetentionPolicy.from_days(7)


@pytest.fixture
def news_repository():
    return InMemoryNewsRepository()


@pytest.fixture
def location_repository():
    return InMemoryLocationRepository()


@pytest.fixture
def fresh_container():
    """Drop cached singletons so each test starts with empty stores."""
    container.reset_singletons()
    yield container
    container.reset_singletons()
