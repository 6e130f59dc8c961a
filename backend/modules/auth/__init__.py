"""
Authentication module.

Handles JWT validation, profile lookups and the admin role check.

Public API:
- IAuthService: Interface for auth operations
- AuthenticatedUser: Minimal user info from JWT
- UserProfile: Row of the profiles table
- UserStatus: Account approval state
- Auth exceptions: InvalidTokenError, ExpiredTokenError, etc.
"""

from .interfaces import IAuthService
from .models import AuthenticatedUser, UserProfile, UserStatus, JWTPayload
from .exceptions import (
    InvalidTokenError,
    ExpiredTokenError,
    MissingTokenError,
    ProfileNotFoundError,
    InsufficientPermissionsError,
)

__all__ = [
    # Interface
    "IAuthService",
    # Models
    "AuthenticatedUser",
    "UserProfile",
    "UserStatus",
    "JWTPayload",
    # Exceptions
    "InvalidTokenError",
    "ExpiredTokenError",
    "MissingTokenError",
    "ProfileNotFoundError",
    "InsufficientPermissionsError",
]
