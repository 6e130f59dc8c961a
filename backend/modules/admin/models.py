"""
Admin module data models.

Request and response bodies for moderation, curation and platform
maintenance. Curation rows (trending products, future masters artists)
are passed through with their full column set.
"""

from datetime import datetime
from decimal import Decimal
from typing import Any, Optional
from pydantic import BaseModel, Field


class ArtworkStatusUpdate(BaseModel):
    """Moderation decision for one listing."""

    id: str = Field(..., min_length=1, description="Artwork ID")
    status: str = Field(..., min_length=1, description="pending, approved or rejected")


class DashboardStats(BaseModel):
    """Counts shown on the admin dashboard."""

    total_users: int = 0
    total_buyers: int = 0
    total_sellers: int = 0
    total_artworks: int = 0
    pending_artworks: int = 0


# -----------------------------------------------------------------------------
# Trending products
# -----------------------------------------------------------------------------


class TrendingArtwork(BaseModel):
    """The artwork behind a trending slot, with image paths flattened."""

    id: str
    title: Optional[str] = None
    artist_name: Optional[str] = None
    price: Optional[Decimal] = None
    currency: Optional[str] = None
    description: Optional[str] = None
    category: Optional[str] = None
    status: Optional[str] = None
    primary_image_path: Optional[str] = None
    image_paths: list[str] = Field(default_factory=list)


class TrendingProduct(BaseModel):
    """A row of admin_trending_products."""

    id: str
    artwork_id: Optional[str] = None
    display_order: int = 1
    is_active: bool = True
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
    artwork: Optional[TrendingArtwork] = None


class CreateTrendingProductRequest(BaseModel):
    artwork_id: str = Field(..., min_length=1)
    display_order: Optional[int] = None


class UpdateTrendingProductRequest(BaseModel):
    id: Optional[str] = None
    display_order: Optional[int] = None
    is_active: Optional[bool] = None


class DeleteRequest(BaseModel):
    """Body of curation DELETE calls."""

    id: Optional[str] = None


class MessageResponse(BaseModel):
    message: str


# -----------------------------------------------------------------------------
# Future masters artists
# -----------------------------------------------------------------------------


class FutureMastersArtistFields(BaseModel):
    """Editable columns of future_masters_artists."""

    name: Optional[str] = None
    location: Optional[str] = None
    specialty: Optional[str] = None
    description: Optional[str] = None
    image_url: Optional[str] = None
    exhibitions: Optional[int] = None
    collections: Optional[int] = None
    awards: Optional[int] = None
    recent_work_1_url: Optional[str] = None
    recent_work_2_url: Optional[str] = None
    artist_name_for_search: Optional[str] = None
    is_active: Optional[bool] = None
    display_order: Optional[int] = None


class FutureMastersArtist(FutureMastersArtistFields):
    """A featured emerging artist."""

    id: str
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class CreateFutureMastersArtistRequest(FutureMastersArtistFields):
    name: str = Field(..., min_length=1)
    is_active: bool = True
    display_order: int = 0


class UpdateFutureMastersArtistRequest(FutureMastersArtistFields):
    id: Optional[str] = None


# -----------------------------------------------------------------------------
# User approvals
# -----------------------------------------------------------------------------


class ApprovalDecision(BaseModel):
    """Admin notes for an approval or rejection."""

    notes: Optional[str] = None
    rejection_reason: Optional[str] = None


class ApprovalResult(BaseModel):
    success: bool = True
    user_id: str
    status: str
    via_rpc: bool = Field(..., description="False when the direct profiles update was used")


# -----------------------------------------------------------------------------
# Platform settings and maintenance
# -----------------------------------------------------------------------------


class PlatformSetting(BaseModel):
    id: str
    setting_key: str
    setting_value: Any
    setting_type: str
    category: str
    description: Optional[str] = None
    updated_at: Optional[datetime] = None


class PlatformSettingsUpdate(BaseModel):
    settings: Any = Field(default_factory=list)


class PlatformSettingsSaved(BaseModel):
    message: str = "Platform settings saved successfully"
    settings: Any


class MaintenanceRequest(BaseModel):
    action: str = ""


class MaintenanceResult(BaseModel):
    message: str
    details: Any = None
