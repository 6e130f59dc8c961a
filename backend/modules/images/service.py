"""
Artwork image storage.

Uploads go to the artwork bucket first and the artwork_images row is
written second. If the row cannot be written the object is removed again,
so storage never holds images that no listing points at.
"""

import logging
from typing import Callable, Optional

from supabase import Client

from modules.artworks.exceptions import NoImagesProvidedError
from modules.artworks.models import ArtworkImage, ImageUploadResponse
from modules.artworks.repository import ArtworkRepository
from shared.exceptions import ExternalServiceError

from .urls import DEFAULT_BUCKET, build_object_path

logger = logging.getLogger(__name__)


class ImageStorage:
    """Artwork image uploads, deletions and row bookkeeping."""

    def __init__(
        self,
        db: Client,
        artworks: ArtworkRepository,
        url_formatter: Callable[[str], str],
        bucket: str = DEFAULT_BUCKET,
        cache_control: str = "3600",
    ) -> None:
        self._db = db
        self._artworks = artworks
        self._format_url = url_formatter
        self._bucket = bucket
        self._cache_control = cache_control

    def _storage(self):
        return self._db.storage.from_(self._bucket)

    def public_url(self, file_path: str) -> str:
        return self._format_url(f"{self._bucket}/{file_path}")

    def upload_artwork_image(
        self,
        artwork_id: str,
        filename: str,
        content: bytes,
        content_type: Optional[str] = None,
        is_primary: bool = False,
    ) -> ImageUploadResponse:
        """
        Store an image and attach it to a listing.

        Raises:
            ExternalServiceError: If the upload or the row insert fails
        """
        file_path = build_object_path(artwork_id, filename)
        file_options = {
            "cache-control": self._cache_control,
            "upsert": "false",
        }
        if content_type:
            file_options["content-type"] = content_type

        try:
            self._storage().upload(path=file_path, file=content, file_options=file_options)
        except Exception as e:
            logger.error("Upload of %s failed: %s", file_path, e)
            raise ExternalServiceError(
                "Image upload failed",
                service="supabase-storage",
                code="UPLOAD_FAILED",
                details={"file_path": file_path},
            ) from e

        try:
            self._artworks.insert_images([
                {"artwork_id": artwork_id, "file_path": file_path, "is_primary": is_primary}
            ])
        except ExternalServiceError:
            logger.warning("Image row insert failed, removing orphaned object %s", file_path)
            self._remove_object(file_path)
            raise

        logger.info("Uploaded image %s for artwork %s", file_path, artwork_id)
        return ImageUploadResponse(file_path=file_path, url=self.public_url(file_path))

    def delete_artwork_image(self, file_path: str) -> None:
        """Remove the stored object and its artwork_images row."""
        try:
            self._storage().remove([file_path])
        except Exception as e:
            raise ExternalServiceError(
                "Image delete failed",
                service="supabase-storage",
                code="DELETE_FAILED",
                details={"file_path": file_path},
            ) from e
        self._artworks.delete_image_record(file_path)

    def link_images(self, images: list[ArtworkImage]) -> int:
        """
        Bulk insert rows for images that are already in storage.

        Raises:
            NoImagesProvidedError: If images is empty
        """
        if not images:
            raise NoImagesProvidedError()

        rows = [
            {
                "artwork_id": image.artwork_id,
                "file_path": image.file_path,
                "is_primary": image.is_primary,
            }
            for image in images
        ]
        return self._artworks.insert_images(rows)

    def _remove_object(self, file_path: str) -> None:
        try:
            self._storage().remove([file_path])
        except Exception as e:
            # The row insert error is the one reported to the caller
            logger.error("Could not remove orphaned object %s: %s", file_path, e)
