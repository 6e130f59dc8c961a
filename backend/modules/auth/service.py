"""
Authentication service implementation.

Validates Supabase JWT tokens and resolves marketplace roles from profiles.
"""

import logging
from datetime import datetime, timezone
from typing import Callable, Optional
import jwt

from fastapi.concurrency import run_in_threadpool
from supabase import AuthError, Client

from shared.auth_client import get_auth_client
from shared.config import Settings, get_settings
from shared.database import get_supabase_client
from shared.models import AuthenticatedUser
from shared.retry import RetryConfig

from .interfaces import IAuthService
from .models import UserProfile, UserStatus, JWTPayload
from .repository import ProfileRepository
from .exceptions import (
    InvalidTokenError,
    ExpiredTokenError,
    MissingTokenError,
    InsufficientPermissionsError,
)

logger = logging.getLogger(__name__)

ADMIN_ROLE = "admin"


class AuthService(IAuthService):
    """
    Implementation of the authentication service.

    Tokens are verified locally with the project's JWT secret. Without a
    secret the shared auth client asks Supabase to resolve the token.
    Profiles are read with the service-role client; profiles_factory lets
    the repository be built on first use so token checks never need it.
    """

    def __init__(
        self,
        profiles: Optional[ProfileRepository] = None,
        auth_client: Optional[Callable[[], Client]] = None,
        settings: Optional[Settings] = None,
        profiles_factory: Optional[Callable[[], ProfileRepository]] = None,
    ):
        self._settings = settings or get_settings()
        self._profiles = profiles
        self._profiles_factory = profiles_factory or self._default_profiles
        self._auth_client = auth_client or get_auth_client

    @property
    def profiles(self) -> ProfileRepository:
        if self._profiles is None:
            self._profiles = self._profiles_factory()
        return self._profiles

    def _default_profiles(self) -> ProfileRepository:
        retry = RetryConfig(
            max_attempts=self._settings.retry_max_attempts,
            delay=self._settings.retry_delay,
        )
        return ProfileRepository(get_supabase_client(), retry)

    async def validate_token(self, token: str) -> AuthenticatedUser:
        """
        Validate a JWT token and return the authenticated user.
        """
        if not token:
            raise MissingTokenError()

        if not self._settings.supabase_jwt_secret:
            return await run_in_threadpool(self._validate_remotely, token)

        try:
            # Decode and validate the JWT
            payload = jwt.decode(
                token,
                self._settings.supabase_jwt_secret,
                algorithms=["HS256"],
                audience="authenticated",
            )

            jwt_payload = JWTPayload(**payload)

            return AuthenticatedUser(
                id=jwt_payload.sub,
                email=jwt_payload.email or None,
                email_verified=jwt_payload.email_confirmed_at is not None,
                last_sign_in=datetime.fromtimestamp(jwt_payload.iat, tz=timezone.utc),
                role=jwt_payload.role if jwt_payload.role != "authenticated" else "user",
            )

        except jwt.ExpiredSignatureError:
            raise ExpiredTokenError()
        except jwt.InvalidTokenError as e:
            raise InvalidTokenError(str(e))

    def _validate_remotely(self, token: str) -> AuthenticatedUser:
        try:
            response = self._auth_client().auth.get_user(token)
        except AuthError as e:
            logger.info("Token rejected by Supabase: %s", e)
            raise InvalidTokenError(str(e))

        user = response.user if response else None
        if user is None:
            raise InvalidTokenError()

        return AuthenticatedUser(
            id=user.id,
            email=user.email or None,
            email_verified=user.email_confirmed_at is not None,
            last_sign_in=user.last_sign_in_at,
            role=user.role if user.role and user.role != "authenticated" else "user",
        )

    async def get_user_by_id(self, user_id: str) -> Optional[UserProfile]:
        """Get a user's profile row by ID."""
        return await run_in_threadpool(self.profiles.get_profile, user_id)

    async def get_user_status(self, user_id: str) -> Optional[UserStatus]:
        """Get the account approval state via the get_user_status RPC."""
        return await run_in_threadpool(self.profiles.get_user_status, user_id)

    async def require_admin(self, user: AuthenticatedUser) -> UserProfile:
        """
        Return the caller's profile if it has the admin role.

        Raises:
            InsufficientPermissionsError: If there is no profile or it is not admin
        """
        profile = await run_in_threadpool(self.profiles.get_profile, user.id)
        if profile is None or not profile.is_admin:
            role = profile.role if profile else "none"
            logger.warning("User %s denied admin access (role %s)", user.id, role)
            raise InsufficientPermissionsError(ADMIN_ROLE, role)
        return profile

