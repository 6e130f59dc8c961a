"""
Admin API endpoints.

Every route requires a caller whose profile role is "admin"; others get 403.
"""

from typing import Optional

from fastapi import APIRouter, Depends, Query

from api.middleware.auth import require_admin
from api.dependencies import get_admin_service
from modules.artworks.models import ArtworkListItem, ArtworkStatus, ArtworkSubmissionResponse
from modules.auth.models import UserProfile
from shared.models import AuthenticatedUser

from .models import (
    ApprovalDecision,
    ApprovalResult,
    ArtworkStatusUpdate,
    CreateFutureMastersArtistRequest,
    CreateTrendingProductRequest,
    DashboardStats,
    DeleteRequest,
    FutureMastersArtist,
    MaintenanceRequest,
    MaintenanceResult,
    MessageResponse,
    PlatformSetting,
    PlatformSettingsSaved,
    PlatformSettingsUpdate,
    TrendingProduct,
    UpdateFutureMastersArtistRequest,
    UpdateTrendingProductRequest,
)
from .service import AdminService

router = APIRouter(dependencies=[Depends(require_admin)])


# -----------------------------------------------------------------------------
# Moderation
# -----------------------------------------------------------------------------


@router.post("/artwork-status", response_model=ArtworkSubmissionResponse)
async def update_artwork_status(
    request: ArtworkStatusUpdate,
    service: AdminService = Depends(get_admin_service),
) -> ArtworkSubmissionResponse:
    """Approve, reject or re-queue a listing."""
    artwork = await service.set_artwork_status(request.id, request.status)
    return ArtworkSubmissionResponse(artwork=artwork)


@router.get("/artworks", response_model=list[ArtworkListItem])
async def list_artworks(
    status: Optional[ArtworkStatus] = Query(default=None, description="Filter by status"),
    service: AdminService = Depends(get_admin_service),
) -> list[ArtworkListItem]:
    """Moderation queue, newest first."""
    return await service.list_artworks(status)


@router.get("/stats", response_model=DashboardStats)
async def get_stats(service: AdminService = Depends(get_admin_service)) -> DashboardStats:
    return await service.get_stats()


# -----------------------------------------------------------------------------
# Trending products
# -----------------------------------------------------------------------------


@router.get("/trending-products", response_model=list[TrendingProduct])
async def list_trending_products(
    service: AdminService = Depends(get_admin_service),
) -> list[TrendingProduct]:
    return await service.list_trending()


@router.post("/trending-products", response_model=TrendingProduct, status_code=201)
async def create_trending_product(
    request: CreateTrendingProductRequest,
    service: AdminService = Depends(get_admin_service),
) -> TrendingProduct:
    return await service.create_trending(request)


@router.put("/trending-products", response_model=TrendingProduct)
async def update_trending_product(
    request: UpdateTrendingProductRequest,
    service: AdminService = Depends(get_admin_service),
) -> TrendingProduct:
    return await service.update_trending(request)


@router.delete("/trending-products", response_model=MessageResponse)
async def delete_trending_product(
    request: Optional[DeleteRequest] = None,
    service: AdminService = Depends(get_admin_service),
) -> MessageResponse:
    await service.delete_trending(request.id if request else None)
    return MessageResponse(message="Product removed from trending list")


# -----------------------------------------------------------------------------
# Future masters artists
# -----------------------------------------------------------------------------


@router.get("/future-masters-artists", response_model=list[FutureMastersArtist])
async def list_future_masters_artists(
    service: AdminService = Depends(get_admin_service),
) -> list[FutureMastersArtist]:
    return await service.list_future_masters()


@router.post("/future-masters-artists", response_model=FutureMastersArtist, status_code=201)
async def create_future_masters_artist(
    request: CreateFutureMastersArtistRequest,
    service: AdminService = Depends(get_admin_service),
) -> FutureMastersArtist:
    return await service.create_future_master(request)


@router.put("/future-masters-artists", response_model=FutureMastersArtist)
async def update_future_masters_artist(
    request: UpdateFutureMastersArtistRequest,
    service: AdminService = Depends(get_admin_service),
) -> FutureMastersArtist:
    return await service.update_future_master(request)


@router.delete("/future-masters-artists", response_model=MessageResponse)
async def delete_future_masters_artist(
    request: Optional[DeleteRequest] = None,
    service: AdminService = Depends(get_admin_service),
) -> MessageResponse:
    await service.delete_future_master(request.id if request else None)
    return MessageResponse(message="Artist removed successfully")


# -----------------------------------------------------------------------------
# User approvals
# -----------------------------------------------------------------------------


@router.get("/approvals", response_model=list[UserProfile])
async def list_pending_users(
    service: AdminService = Depends(get_admin_service),
) -> list[UserProfile]:
    """Profiles whose approval status is pending or unset."""
    return await service.list_pending_users()


@router.post("/approvals/{user_id}/approve", response_model=ApprovalResult)
async def approve_user(
    user_id: str,
    decision: Optional[ApprovalDecision] = None,
    admin: AuthenticatedUser = Depends(require_admin),
    service: AdminService = Depends(get_admin_service),
) -> ApprovalResult:
    return await service.approve_user(user_id, admin.id, decision or ApprovalDecision())


@router.post("/approvals/{user_id}/reject", response_model=ApprovalResult)
async def reject_user(
    user_id: str,
    decision: ApprovalDecision,
    admin: AuthenticatedUser = Depends(require_admin),
    service: AdminService = Depends(get_admin_service),
) -> ApprovalResult:
    """Reject an account. A rejection reason is required."""
    return await service.reject_user(user_id, admin.id, decision)


# -----------------------------------------------------------------------------
# Platform settings and maintenance
# -----------------------------------------------------------------------------


@router.get("/platform-settings", response_model=list[PlatformSetting])
async def get_platform_settings(
    service: AdminService = Depends(get_admin_service),
) -> list[PlatformSetting]:
    return await service.get_platform_settings()


@router.post("/platform-settings", response_model=PlatformSettingsSaved)
async def save_platform_settings(
    request: PlatformSettingsUpdate,
    service: AdminService = Depends(get_admin_service),
) -> PlatformSettingsSaved:
    saved = await service.save_platform_settings(request.settings)
    return PlatformSettingsSaved(settings=saved)


@router.post("/system-maintenance", response_model=MaintenanceResult)
async def run_system_maintenance(
    request: MaintenanceRequest,
    service: AdminService = Depends(get_admin_service),
) -> MaintenanceResult:
    """Run one maintenance action; unknown actions get 400 with the valid list."""
    return await service.run_maintenance(request.action)
