# interfaces/image_store.py

"""
Opaque blob storage for news images.
"""

from abc import ABC, abstractmethod

from ..schemas.news_schemas import ImageUpload


class ImageStore(ABC):
    """Abstract base class for image storage backends."""

    @abstractmethod
    async def save(self, image: ImageUpload) -> str:
        """
        Store an uploaded image.

        Args:
            image: Uploaded file name, content type and bytes

        Returns:
            str: Opaque reference to the stored image

        Raises:
            InvalidImageError: When the upload is not an acceptable image
        """
        pass

    @abstractmethod
    async def delete(self, image_ref: str) -> bool:
        pass
