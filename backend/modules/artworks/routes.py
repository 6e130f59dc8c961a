"""
Artwork API endpoints.

Submission, browsing and image attachment for listings. Errors raised by
the service are CuratorError subclasses and are turned into JSON responses
by the application's exception handlers.
"""

from fastapi import APIRouter, Depends, File, Form, Query, UploadFile

from api.middleware.auth import get_current_user
from api.dependencies import get_artwork_service
from shared.models import AuthenticatedUser

from .interfaces import IArtworkService
from .models import (
    Artwork,
    ArtworkListItem,
    ArtworkSubmissionResponse,
    CreateArtworkRequest,
    ImageLinkRequest,
    ImageLinkResponse,
    ImageUploadResponse,
)
from .service import LATEST_LIMIT

router = APIRouter()


@router.post("/artworks", response_model=ArtworkSubmissionResponse)
async def submit_artwork(
    request: CreateArtworkRequest,
    user: AuthenticatedUser = Depends(get_current_user),
    service: IArtworkService = Depends(get_artwork_service),
) -> ArtworkSubmissionResponse:
    """
    Submit a listing for review.

    The listing always starts in 'pending' status.
    """
    artwork = await service.submit_artwork(user.id, request)
    return ArtworkSubmissionResponse(artwork=artwork)


@router.get("/artworks", response_model=list[ArtworkListItem])
async def list_latest_artworks(
    limit: int = Query(default=LATEST_LIMIT, ge=1, le=100),
    service: IArtworkService = Depends(get_artwork_service),
) -> list[ArtworkListItem]:
    """Newest approved listings."""
    return await service.list_latest(limit)


@router.get("/artworks/mine", response_model=list[ArtworkListItem])
async def list_my_artworks(
    user: AuthenticatedUser = Depends(get_current_user),
    service: IArtworkService = Depends(get_artwork_service),
) -> list[ArtworkListItem]:
    """The current seller's listings in every status."""
    return await service.list_for_user(user.id)


@router.get("/artworks/{artwork_id}", response_model=Artwork)
async def get_artwork(
    artwork_id: str,
    service: IArtworkService = Depends(get_artwork_service),
) -> Artwork:
    return await service.get_artwork(artwork_id)


@router.post("/artwork-images", response_model=ImageLinkResponse)
async def link_artwork_images(
    request: ImageLinkRequest,
    user: AuthenticatedUser = Depends(get_current_user),
    service: IArtworkService = Depends(get_artwork_service),
) -> ImageLinkResponse:
    """Attach images that are already in storage to the user's listings."""
    count = await service.link_images(user.id, request.images)
    return ImageLinkResponse(count=count)


@router.post("/artworks/{artwork_id}/images", response_model=ImageUploadResponse)
async def upload_artwork_image(
    artwork_id: str,
    file: UploadFile = File(...),
    is_primary: bool = Form(default=False),
    user: AuthenticatedUser = Depends(get_current_user),
    service: IArtworkService = Depends(get_artwork_service),
) -> ImageUploadResponse:
    """Upload an image file to one of the user's listings."""
    content = await file.read()
    return await service.upload_image(
        user.id,
        artwork_id,
        file.filename or "upload",
        content,
        content_type=file.content_type,
        is_primary=is_primary,
    )


@router.delete("/artworks/{artwork_id}/images", status_code=204)
async def delete_artwork_image(
    artwork_id: str,
    file_path: str = Query(..., min_length=1),
    user: AuthenticatedUser = Depends(get_current_user),
    service: IArtworkService = Depends(get_artwork_service),
) -> None:
    """Delete an image from one of the user's listings."""
    await service.delete_image(user.id, artwork_id, file_path)
