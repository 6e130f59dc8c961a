"""
Admin module.

Listing moderation, dashboard statistics, homepage curation (trending
products, future masters artists), account approvals and maintenance.
"""

from .models import (
    ArtworkStatusUpdate,
    DashboardStats,
    TrendingProduct,
    FutureMastersArtist,
    PlatformSetting,
    MaintenanceResult,
)
from .exceptions import (
    MissingIdError,
    CurationItemNotFoundError,
    RejectionReasonRequiredError,
    InvalidMaintenanceActionError,
)

__all__ = [
    # Models
    "ArtworkStatusUpdate",
    "DashboardStats",
    "TrendingProduct",
    "FutureMastersArtist",
    "PlatformSetting",
    "MaintenanceResult",
    # Exceptions
    "MissingIdError",
    "CurationItemNotFoundError",
    "RejectionReasonRequiredError",
    "InvalidMaintenanceActionError",
]
