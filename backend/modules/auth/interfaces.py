"""
Authentication module interface.

Other modules should depend on IAuthService, not the concrete implementation.
"""

from typing import Protocol, Optional, runtime_checkable

from .models import AuthenticatedUser, UserProfile, UserStatus


@runtime_checkable
class IAuthService(Protocol):
    """
    Interface for authentication operations.
    """

    async def validate_token(self, token: str) -> AuthenticatedUser:
        """
        Validate a JWT token and return the authenticated user.

        Args:
            token: JWT access token from Supabase Auth

        Returns:
            AuthenticatedUser with user ID and basic info

        Raises:
            AuthenticationError: If token is invalid or expired
        """
        ...

    async def get_user_by_id(self, user_id: str) -> Optional[UserProfile]:
        """
        Get a user's profile by their ID.

        Returns:
            UserProfile if found, None otherwise
        """
        ...

    async def get_user_status(self, user_id: str) -> Optional[UserStatus]:
        """Get the account approval state, None if unknown."""
        ...

    async def require_admin(self, user: AuthenticatedUser) -> UserProfile:
        """
        Return the user's profile if the user is an admin.

        Raises:
            InsufficientPermissionsError: Otherwise
        """
        ...
