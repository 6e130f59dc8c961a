"""
Shared infrastructure for the AI Curator backend.

This package contains cross-cutting concerns that are used by multiple modules:
- config: Centralized settings management
- database: Service-role Supabase client factory
- auth_client: The single process-wide auth client
- exceptions: Base exception classes
- retry: Bounded retry for auth failures

Note: Business logic should NOT go here. This is for infrastructure only.
"""

from .config import Settings, get_settings
from .database import get_supabase_client, reset_client_cache
from .auth_client import (
    AuthClientRegistry,
    AuthClientLockedError,
    SessionStore,
    get_auth_client,
    get_auth_client_registry,
    reset_auth_client_registry,
)
from .exceptions import (
    CuratorError,
    NotFoundError,
    ValidationError,
    AuthenticationError,
    AuthorizationError,
    ExternalServiceError,
    SessionExpiredError,
)
from .models import AuthenticatedUser
from .retry import RetryConfig, with_auth_retry, is_auth_error

__all__ = [
    "Settings",
    "get_settings",
    "get_supabase_client",
    "reset_client_cache",
    "AuthClientRegistry",
    "AuthClientLockedError",
    "SessionStore",
    "get_auth_client",
    "get_auth_client_registry",
    "reset_auth_client_registry",
    "CuratorError",
    "NotFoundError",
    "ValidationError",
    "AuthenticationError",
    "AuthorizationError",
    "ExternalServiceError",
    "SessionExpiredError",
    "AuthenticatedUser",
    "RetryConfig",
    "with_auth_retry",
    "is_auth_error",
]
