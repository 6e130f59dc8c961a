"""
Artworks service implementation with Supabase.

All database access goes through ArtworkRepository with the service-role
client, so ownership is checked here before anything is written.
"""

import logging
from typing import Optional

from fastapi.concurrency import run_in_threadpool

from shared.exceptions import ValidationError

from .interfaces import IArtworkService
from .models import (
    CORE_FIELDS,
    Artwork,
    ArtworkImage,
    ArtworkListItem,
    ArtworkStatus,
    CreateArtworkRequest,
    ImageUploadResponse,
)
from .repository import ArtworkRepository
from .exceptions import (
    ArtworkAccessDeniedError,
    ArtworkNotFoundError,
    InvalidArtworkStatusError,
)

logger = logging.getLogger(__name__)

LATEST_LIMIT = 12


class ArtworkService(IArtworkService):
    """
    Artwork service with Supabase backend.

    Implements IArtworkService protocol. Image uploads are delegated to the
    images module's ImageStorage.
    """

    def __init__(self, repository: ArtworkRepository, images=None):
        self._repo = repository
        self._images = images  # ImageStorage - injected

    async def submit_artwork(
        self,
        user_id: str,
        request: CreateArtworkRequest,
    ) -> Artwork:
        """Insert a pending listing holding only the core columns."""
        data = {
            "user_id": user_id,
            "title": request.title.strip() or "Untitled",
            "category": request.category or "other",
            "status": ArtworkStatus.PENDING.value,
            "price": str(request.price) if request.price is not None else None,
            "description": request.description,
            "artist_name": request.artist_name,
            "currency": request.currency.upper(),
        }
        payload = {k: v for k, v in data.items() if k in CORE_FIELDS and v is not None}

        artwork = await run_in_threadpool(self._repo.create_artwork, payload)
        logger.info("Artwork %s submitted by %s", artwork.id, user_id)
        return artwork

    async def get_artwork(self, artwork_id: str) -> Artwork:
        artwork = await run_in_threadpool(self._repo.get_artwork, artwork_id)
        if artwork is None:
            raise ArtworkNotFoundError(artwork_id)

        artist = await run_in_threadpool(self._repo.get_artist_profile, artwork.user_id)
        return artwork.model_copy(update={"artist": artist})

    async def list_latest(self, limit: int = LATEST_LIMIT) -> list[ArtworkListItem]:
        return await run_in_threadpool(
            self._repo.list_artworks, status=ArtworkStatus.APPROVED, limit=limit
        )

    async def list_for_user(self, user_id: str) -> list[ArtworkListItem]:
        return await run_in_threadpool(self._repo.list_artworks, user_id=user_id)

    async def list_by_status(
        self,
        status: Optional[ArtworkStatus] = None,
    ) -> list[ArtworkListItem]:
        return await run_in_threadpool(self._repo.list_artworks, status=status)

    async def set_status(self, artwork_id: str, status: str) -> Artwork:
        try:
            new_status = ArtworkStatus(status)
        except ValueError:
            raise InvalidArtworkStatusError(status)

        artwork = await run_in_threadpool(self._repo.update_status, artwork_id, new_status)
        if artwork is None:
            raise ArtworkNotFoundError(artwork_id)

        logger.info("Artwork %s set to %s", artwork_id, new_status.value)
        return artwork

    async def link_images(self, user_id: str, images: list[ArtworkImage]) -> int:
        artwork_ids = {image.artwork_id for image in images}
        if None in artwork_ids:
            raise ValidationError("Every image needs an artwork_id", code="MISSING_ARTWORK_ID")

        for artwork_id in artwork_ids:
            await run_in_threadpool(self._check_owner, artwork_id, user_id)

        return await run_in_threadpool(self._images.link_images, images)

    async def upload_image(
        self,
        user_id: str,
        artwork_id: str,
        filename: str,
        content: bytes,
        content_type: Optional[str] = None,
        is_primary: bool = False,
    ) -> ImageUploadResponse:
        await run_in_threadpool(self._check_owner, artwork_id, user_id)
        return await run_in_threadpool(
            self._images.upload_artwork_image,
            artwork_id,
            filename,
            content,
            content_type=content_type,
            is_primary=is_primary,
        )

    async def delete_image(self, user_id: str, artwork_id: str, file_path: str) -> None:
        await run_in_threadpool(self._check_owner, artwork_id, user_id)
        if not file_path.startswith(f"{artwork_id}/"):
            raise ArtworkAccessDeniedError(artwork_id, user_id)
        await run_in_threadpool(self._images.delete_artwork_image, file_path)

    def _check_owner(self, artwork_id: str, user_id: str) -> Artwork:
        artwork = self._repo.get_artwork(artwork_id)
        if artwork is None:
            raise ArtworkNotFoundError(artwork_id)
        if artwork.user_id != user_id:
            raise ArtworkAccessDeniedError(artwork_id, user_id)
        return artwork
