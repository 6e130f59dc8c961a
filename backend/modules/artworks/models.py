"""
Artworks module data models.

These models mirror rows of the hosted artworks, artwork_images and
profiles tables. They carry no state of their own beyond a request.
"""

from datetime import datetime
from decimal import Decimal
from enum import Enum
from typing import Optional, Any
from pydantic import BaseModel, Field, computed_field

from .currency import format_price


class ArtworkStatus(str, Enum):
    """Moderation status of a listing."""

    PENDING = "pending"      # Submitted, awaiting review
    APPROVED = "approved"    # Visible in the marketplace
    REJECTED = "rejected"    # Declined by an admin


# Columns the submission proxy is allowed to write
CORE_FIELDS = (
    "user_id",
    "title",
    "category",
    "status",
    "price",
    "description",
    "artist_name",
    "currency",
)


class ArtworkImage(BaseModel):
    """An image attached to a listing."""

    id: Optional[str] = None
    artwork_id: Optional[str] = None
    file_path: str = Field(..., description="Object key inside the artwork bucket")
    is_primary: bool = False
    url: Optional[str] = Field(None, description="Public storage URL")


class ArtistProfile(BaseModel):
    """Public slice of a seller's profile."""

    full_name: Optional[str] = None
    avatar_url: Optional[str] = None


class Artwork(BaseModel):
    """A full artwork listing with images and artist."""

    id: str
    user_id: str
    title: str
    category: str = "other"
    status: ArtworkStatus = ArtworkStatus.PENDING
    price: Optional[Decimal] = None
    currency: str = "GBP"
    description: Optional[str] = None
    artist_name: Optional[str] = None
    dimensions: Optional[Any] = None
    images: list[ArtworkImage] = Field(default_factory=list)
    artist: Optional[ArtistProfile] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @computed_field
    @property
    def price_display(self) -> Optional[str]:
        return format_price(self.price, self.currency) if self.price is not None else None

    @property
    def primary_image(self) -> Optional[ArtworkImage]:
        """The primary image, falling back to the first one."""
        for image in self.images:
            if image.is_primary:
                return image
        return self.images[0] if self.images else None


class ArtworkListItem(BaseModel):
    """Summary card used by listings, search and the dashboard."""

    id: str
    title: str
    category: str = "other"
    status: ArtworkStatus
    price: Optional[Decimal] = None
    currency: str = "GBP"
    artist_name: Optional[str] = None
    description: Optional[str] = None
    image_url: Optional[str] = None
    created_at: Optional[datetime] = None

    @computed_field
    @property
    def price_display(self) -> Optional[str]:
        return format_price(self.price, self.currency) if self.price is not None else None


class CreateArtworkRequest(BaseModel):
    """Request to submit a new listing."""

    title: str = Field(..., min_length=1, max_length=300)
    category: str = Field(default="other", max_length=100)
    price: Optional[Decimal] = Field(None, ge=0)
    currency: str = Field(default="GBP", min_length=3, max_length=3)
    description: Optional[str] = Field(None, max_length=10000)
    artist_name: Optional[str] = Field(None, max_length=300)


class ArtworkSubmissionResponse(BaseModel):
    """Response for a successful submission or status change."""

    success: bool = True
    artwork: Artwork


class ImageLinkRequest(BaseModel):
    """Bulk link of already-uploaded images to a listing."""

    images: list[ArtworkImage] = Field(default_factory=list)


class ImageLinkResponse(BaseModel):
    """Response for a bulk image link."""

    success: bool = True
    count: int


class ImageUploadResponse(BaseModel):
    """Response for a direct image upload."""

    success: bool = True
    file_path: str
    url: str
