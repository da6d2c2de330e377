# services/news_service.py

from typing import Any, Callable, Mapping, Optional
from datetime import datetime

from ..core.exceptions import StorageFailureError, ValidationError
from ..core.retention import utc_now
from ..interfaces.image_store import ImageStore
from ..interfaces.news_repository_interface import NewsRepositoryInterface
from ..schemas.news_schemas import ImageUpload, NewsItem
from ..utils.validation import DEFAULT_MAX_CONTENT_LENGTH, validate_news_input
from common.logger import LoggerFactory, LoggerType, LogLevel


class NewsService:
    """
    News service handling creation of location-tagged news items.
    Validates input before anything is written, stores the optional image and
    persists the item with a server-assigned timestamp.
    """

    def __init__(
        self,
        repository: NewsRepositoryInterface,
        image_store: Optional[ImageStore] = None,
        max_content_length: int = DEFAULT_MAX_CONTENT_LENGTH,
        clock: Callable[[], datetime] = utc_now,
    ):
        """
        Initialize news service

        Args:
            repository: News repository implementation
            image_store: Blob store for attached images
            max_content_length: Longest accepted content
            clock: Source of creation timestamps
        """
        self.repository = repository
        self.image_store = image_store
        self.max_content_length = max_content_length
        self.clock = clock
        self.logger = LoggerFactory.get_logger(
            name="news-service",
            logger_type=LoggerType.STANDARD,
            level=LogLevel.INFO,
            file_level=LogLevel.DEBUG,
            log_file="logs/news_service.log",
        )
        self.logger.info("NewsService initialized")

    async def create_news(
        self, fields: Mapping[str, Any], image: Optional[ImageUpload] = None
    ) -> NewsItem:
        """
        Validate and store a news item

        Args:
            fields: Raw ``content``, ``latitude`` and ``longitude`` values
            image: Optional uploaded image

        Returns:
            NewsItem: Stored item with ``id`` and ``created_at``

        Raises:
            ValidationError: Invalid input, nothing is stored
            StorageFailureError: The store or image store failed
        """
        try:
            request = validate_news_input(
                fields, image=image, max_content_length=self.max_content_length
            )
        except ValidationError as e:
            self.logger.warning(f"Rejected news item: {e.code}: {e.message}")
            raise

        image_ref = None
        if request.image is not None:
            if self.image_store is None:
                raise StorageFailureError("Image storage is not configured")
            image_ref = await self.image_store.save(request.image)

        news_item = NewsItem(
            content=request.content,
            location=request.location,
            image_ref=image_ref,
            created_at=self.clock(),
        )

        try:
            stored = await self.repository.save_news_item(news_item)
        except StorageFailureError:
            if image_ref is not None:
                await self._discard_image(image_ref)
            raise

        self.logger.info(
            f"Created news item {stored.id} at "
            f"({stored.location.latitude}, {stored.location.longitude})"
        )
        return stored

    async def _discard_image(self, image_ref: str) -> None:
        try:
            await self.image_store.delete(image_ref)
        except StorageFailureError as e:
            self.logger.error(f"Failed to discard orphaned image {image_ref}: {e}")
