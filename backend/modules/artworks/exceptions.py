"""
Artworks module exceptions.
"""

from shared.exceptions import (
    NotFoundError,
    ValidationError,
    AuthorizationError,
)


class ArtworkNotFoundError(NotFoundError):
    """Raised when an artwork is not found."""

    def __init__(self, artwork_id: str):
        super().__init__(
            f"Artwork not found: {artwork_id}",
            code="ARTWORK_NOT_FOUND",
            details={"artwork_id": artwork_id},
        )


class ArtworkAccessDeniedError(AuthorizationError):
    """Raised when a user touches a listing they do not own."""

    def __init__(self, artwork_id: str, user_id: str):
        super().__init__(
            f"Access denied to artwork: {artwork_id}",
            code="ARTWORK_ACCESS_DENIED",
            details={"artwork_id": artwork_id, "user_id": user_id},
        )


class InvalidArtworkStatusError(ValidationError):
    """Raised for a status outside pending/approved/rejected."""

    def __init__(self, status: str):
        super().__init__(
            "Invalid status value",
            code="INVALID_STATUS",
            details={"status": status, "allowed": ["pending", "approved", "rejected"]},
        )


class NoImagesProvidedError(ValidationError):
    """Raised when an image link request carries no images."""

    def __init__(self):
        super().__init__("No images provided", code="NO_IMAGES")
