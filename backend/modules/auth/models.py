"""
Authentication module data models.

These models define the data structures used by the auth module
and exposed to other modules through the interface.
"""

from datetime import datetime
from typing import Optional
from pydantic import BaseModel, Field, field_validator

from shared.models import AuthenticatedUser


class JWTPayload(BaseModel):
    """
    Decoded JWT token payload from Supabase.

    This matches the structure of Supabase Auth JWTs.
    """

    sub: str = Field(..., description="Subject (user ID)")
    email: Optional[str] = Field(None, description="User's email")
    email_confirmed_at: Optional[str] = Field(None, description="Email confirmation time")
    exp: int = Field(..., description="Expiration timestamp")
    iat: int = Field(..., description="Issued at timestamp")
    aud: str = Field(default="authenticated", description="Audience")
    role: str = Field(default="authenticated", description="User role")

    # Supabase-specific claims
    app_metadata: dict = Field(default_factory=dict)
    user_metadata: dict = Field(default_factory=dict)


class UserProfile(BaseModel):
    """
    A row of the profiles table.

    role is the marketplace role ("admin" or "user"); user_type tells
    buyers from sellers; user_status is the account approval state.
    """

    id: str = Field(..., description="User ID (UUID)")
    email: Optional[str] = Field(None, description="Email address")
    full_name: Optional[str] = Field(None, description="Display name")
    avatar_url: Optional[str] = Field(None, description="Avatar URL")
    role: str = Field(default="user", description="Marketplace role")
    user_type: Optional[str] = Field(None, description="buyer or seller")
    user_status: Optional[str] = Field(None, description="Approval status")
    admin_notes: Optional[str] = None
    rejection_reason: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    model_config = {"extra": "ignore"}

    @field_validator("role", mode="before")
    @classmethod
    def default_role(cls, v: Optional[str]) -> str:
        """A NULL role column reads as a regular user."""
        return v or "user"

    @property
    def is_admin(self) -> bool:
        return self.role == "admin"


class UserStatus(BaseModel):
    """Approval state as reported by the get_user_status RPC."""

    status: str = Field(default="pending", description="pending, approved, rejected or suspended")
    changed_at: Optional[datetime] = None
    changed_by: Optional[str] = None
    notes: Optional[str] = None
    rejection_reason: Optional[str] = None

    @field_validator("status", mode="before")
    @classmethod
    def default_status(cls, v: Optional[str]) -> str:
        return v or "pending"


__all__ = ["AuthenticatedUser", "JWTPayload", "UserProfile", "UserStatus"]
