# adapters/local_image_store.py

"""
Image store writing uploads to a local directory.
"""

import random
import time
from pathlib import Path
from typing import Optional

import aiofiles
import aiofiles.os

from common.logger import LoggerFactory, LoggerType, LogLevel

from ..core.exceptions import InvalidImageError, StorageFailureError
from ..interfaces.image_store import ImageStore
from ..schemas.news_schemas import ImageUpload


class LocalImageStore(ImageStore):
    """Stores images as files named ``<epoch-ms>-<random><ext>``"""

    def __init__(
        self,
        upload_dir: str = "uploads/news",
        max_bytes: int = 5 * 1024 * 1024,
        base_url: Optional[str] = None,
    ):
        """
        Initialize local image store

        Args:
            upload_dir: Directory receiving the files
            max_bytes: Largest accepted upload
            base_url: Optional public prefix prepended to returned references
        """
        self.upload_dir = Path(upload_dir)
        self.max_bytes = max_bytes
        self.base_url = base_url.rstrip("/") if base_url else None
        self.logger = LoggerFactory.get_logger(
            name="local-image-store",
            logger_type=LoggerType.STANDARD,
            level=LogLevel.INFO,
        )

    def _validate(self, image: ImageUpload) -> None:
        if not image.content_type or not image.content_type.startswith("image/"):
            raise InvalidImageError("Only image files are allowed", field="image")
        if not image.data:
            raise InvalidImageError("Image file is empty", field="image")
        if len(image.data) > self.max_bytes:
            raise InvalidImageError(
                f"Image must be at most {self.max_bytes // (1024 * 1024)}MB",
                field="image",
            )

    @staticmethod
    def _unique_name(filename: Optional[str]) -> str:
        extension = Path(filename).suffix.lower() if filename else ""
        return f"{int(time.time() * 1000)}-{random.randint(0, 10**9)}{extension}"

    def _to_ref(self, name: str) -> str:
        return f"{self.base_url}/{name}" if self.base_url else name

    def _to_path(self, image_ref: str) -> Path:
        return self.upload_dir / Path(image_ref).name

    async def save(self, image: ImageUpload) -> str:
        self._validate(image)
        name = self._unique_name(image.filename)
        path = self.upload_dir / name

        try:
            await aiofiles.os.makedirs(self.upload_dir, exist_ok=True)
            async with aiofiles.open(path, "wb") as f:
                await f.write(image.data)
        except OSError as e:
            self.logger.error(f"Failed to write image {path}: {e}")
            raise StorageFailureError("Failed to store image") from e

        self.logger.debug(f"Stored image {name} ({len(image.data)} bytes)")
        return self._to_ref(name)

    async def delete(self, image_ref: str) -> bool:
        path = self._to_path(image_ref)
        try:
            await aiofiles.os.remove(path)
            return True
        except FileNotFoundError:
            return False
        except OSError as e:
            self.logger.error(f"Failed to delete image {path}: {e}")
            raise StorageFailureError("Failed to delete image") from e
