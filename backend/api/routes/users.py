"""
User-related endpoints.

Provides the current user's profile and account approval state.
"""

from typing import Optional

from fastapi import APIRouter, Depends
from pydantic import BaseModel

from modules.auth.exceptions import ProfileNotFoundError
from modules.auth.models import UserStatus
from shared.models import AuthenticatedUser
from ..dependencies import get_auth_service
from ..middleware.auth import get_current_user

router = APIRouter()


class UserProfileResponse(BaseModel):
    """User profile response model."""

    id: str
    email: Optional[str] = None
    email_verified: bool
    full_name: Optional[str] = None
    avatar_url: Optional[str] = None
    role: str
    user_type: Optional[str] = None
    status: Optional[UserStatus] = None


@router.get("/me", response_model=UserProfileResponse)
async def get_current_user_profile(
    user: AuthenticatedUser = Depends(get_current_user),
    auth=Depends(get_auth_service),
) -> UserProfileResponse:
    """
    Get the current user's profile.

    Requires authentication.
    """
    profile = await auth.get_user_by_id(user.id)
    if profile is None:
        raise ProfileNotFoundError(user.id)

    return UserProfileResponse(
        id=user.id,
        email=profile.email or user.email,
        email_verified=user.email_verified,
        full_name=profile.full_name,
        avatar_url=profile.avatar_url,
        role=profile.role,
        user_type=profile.user_type,
        status=await auth.get_user_status(user.id),
    )
