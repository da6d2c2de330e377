# tests/test_local_image_store.py

"""
Tests for the local image store.
"""

import re

import pytest

from nearby_news.adapters.local_image_store import LocalImageStore
from nearby_news.core.exceptions import InvalidImageError
from nearby_news.schemas.news_schemas import ImageUpload

PNG_BYTES = b"\x89PNG\r\n\x1a\n" + b"\x00" * 16


class TestLocalImageStore:
    """Test cases for LocalImageStore."""

    @pytest.mark.asyncio
    async def test_save_writes_file(self, tmp_path):
        store = LocalImageStore(upload_dir=str(tmp_path / "news"))

        ref = await store.save(
            ImageUpload(filename="Photo.PNG", content_type="image/png", data=PNG_BYTES)
        )

        assert re.fullmatch(r"\d+-\d+\.png", ref)
        assert (tmp_path / "news" / ref).read_bytes() == PNG_BYTES

    @pytest.mark.asyncio
    async def test_base_url_prefix(self, tmp_path):
        store = LocalImageStore(upload_dir=str(tmp_path), base_url="http://cdn.local/news/")

        ref = await store.save(
            ImageUpload(filename="a.jpg", content_type="image/jpeg", data=b"jpeg")
        )

        assert ref.startswith("http://cdn.local/news/")
        assert await store.delete(ref) is True

    @pytest.mark.asyncio
    async def test_rejects_non_image(self, tmp_path):
        store = LocalImageStore(upload_dir=str(tmp_path))

        with pytest.raises(InvalidImageError):
            await store.save(
                ImageUpload(filename="notes.txt", content_type="text/plain", data=b"hi")
            )
        assert list(tmp_path.iterdir()) == []

    @pytest.mark.asyncio
    async def test_rejects_oversized_image(self, tmp_path):
        store = LocalImageStore(upload_dir=str(tmp_path), max_bytes=10)

        with pytest.raises(InvalidImageError):
            await store.save(
                ImageUpload(filename="big.png", content_type="image/png", data=PNG_BYTES)
            )

    @pytest.mark.asyncio
    async def test_rejects_empty_image(self, tmp_path):
        store = LocalImageStore(upload_dir=str(tmp_path))

        with pytest.raises(InvalidImageError):
            await store.save(ImageUpload(filename="a.png", content_type="image/png"))

    @pytest.mark.asyncio
    async def test_delete(self, tmp_path):
        store = LocalImageStore(upload_dir=str(tmp_path))
        ref = await store.save(
            ImageUpload(filename="a.png", content_type="image/png", data=PNG_BYTES)
        )

        assert await store.delete(ref) is True
        assert await store.delete(ref) is False
        assert not (tmp_path / ref).exists()
