"""
Artworks module.

Handles listing submission, browsing and moderation status.

Public API:
- IArtworkService: Interface for listing operations
- Artwork: Full listing with images and artist
- ArtworkListItem: Summary card
- CreateArtworkRequest: Request to submit a listing
"""

from .interfaces import IArtworkService
from .models import (
    Artwork,
    ArtworkImage,
    ArtworkListItem,
    ArtworkStatus,
    ArtistProfile,
    CreateArtworkRequest,
    ArtworkSubmissionResponse,
    ImageLinkRequest,
    ImageLinkResponse,
    ImageUploadResponse,
)
from .exceptions import (
    ArtworkNotFoundError,
    ArtworkAccessDeniedError,
    InvalidArtworkStatusError,
    NoImagesProvidedError,
)

__all__ = [
    # Interface
    "IArtworkService",
    # Models
    "Artwork",
    "ArtworkImage",
    "ArtworkListItem",
    "ArtworkStatus",
    "ArtistProfile",
    "CreateArtworkRequest",
    "ArtworkSubmissionResponse",
    "ImageLinkRequest",
    "ImageLinkResponse",
    "ImageUploadResponse",
    # Exceptions
    "ArtworkNotFoundError",
    "ArtworkAccessDeniedError",
    "InvalidArtworkStatusError",
    "NoImagesProvidedError",
]
