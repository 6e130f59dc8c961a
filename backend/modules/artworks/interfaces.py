"""
Artworks module interface.

The API layer and the admin module depend on IArtworkService for every
listing operation.
"""

from typing import Optional, Protocol, runtime_checkable

from .models import (
    Artwork,
    ArtworkImage,
    ArtworkListItem,
    ArtworkStatus,
    CreateArtworkRequest,
    ImageUploadResponse,
)


@runtime_checkable
class IArtworkService(Protocol):
    """
    Interface for artwork listing operations.
    """

    async def submit_artwork(
        self,
        user_id: str,
        request: CreateArtworkRequest,
    ) -> Artwork:
        """
        Submit a new listing for review.

        The listing is always created in PENDING status, whatever the
        caller asks for.

        Args:
            user_id: ID of the submitting seller
            request: Listing fields

        Returns:
            The created artwork
        """
        ...

    async def get_artwork(self, artwork_id: str) -> Artwork:
        """
        Get a listing with images and artist profile.

        Raises:
            ArtworkNotFoundError: If the artwork doesn't exist
        """
        ...

    async def list_latest(self, limit: int = 12) -> list[ArtworkListItem]:
        """Newest approved listings."""
        ...

    async def list_for_user(self, user_id: str) -> list[ArtworkListItem]:
        """All listings of one seller, any status."""
        ...

    async def list_by_status(
        self,
        status: Optional[ArtworkStatus] = None,
    ) -> list[ArtworkListItem]:
        """Listings filtered by moderation status (all when None)."""
        ...

    async def set_status(self, artwork_id: str, status: str) -> Artwork:
        """
        Change the moderation status of a listing.

        Raises:
            InvalidArtworkStatusError: If status is not pending/approved/rejected
            ArtworkNotFoundError: If the artwork doesn't exist
        """
        ...

    async def link_images(self, user_id: str, images: list[ArtworkImage]) -> int:
        """
        Attach already-uploaded images to listings the user owns.

        Returns:
            Number of image rows written

        Raises:
            NoImagesProvidedError: If images is empty
            ArtworkAccessDeniedError: If any listing belongs to someone else
        """
        ...

    async def upload_image(
        self,
        user_id: str,
        artwork_id: str,
        filename: str,
        content: bytes,
        content_type: Optional[str] = None,
        is_primary: bool = False,
    ) -> ImageUploadResponse:
        """Upload an image file to a listing the user owns."""
        ...

    async def delete_image(self, user_id: str, artwork_id: str, file_path: str) -> None:
        """Delete one of the images of a listing the user owns."""
        ...
