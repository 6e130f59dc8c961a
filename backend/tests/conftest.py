"""
Shared test fixtures and utilities.

This module provides common test infrastructure used across all test modules.
"""

import pytest
from datetime import datetime, timezone, timedelta
from typing import Optional
from unittest.mock import MagicMock
import jwt  # PyJWT

from api.dependencies import reset_container
from shared.auth_client import reset_auth_client_registry
from shared.config import Settings, get_settings
from shared.database import reset_client_cache
from shared.retry import RetryConfig


# Test JWT secret (only for testing)
TEST_JWT_SECRET = "test-secret-key-for-testing-only"

# Retry policy that never sleeps
NO_SLEEP_RETRY = RetryConfig(max_attempts=3, delay=1.0, sleep=lambda _: None)


def create_test_token(
    user_id: str = "test-user-123",
    email: str = "test@example.com",
    expired: bool = False,
    email_verified: bool = True,
    secret: str = TEST_JWT_SECRET,
) -> str:
    """
    Create a test JWT token for authentication.

    Args:
        user_id: User ID to include in the token
        email: Email to include in the token
        expired: If True, creates an expired token
        email_verified: Whether the email should be marked as verified
        secret: Signing secret

    Returns:
        JWT token string
    """
    now = datetime.now(timezone.utc)
    exp = now - timedelta(hours=1) if expired else now + timedelta(hours=1)

    payload = {
        "sub": user_id,
        "email": email,
        "email_confirmed_at": now.isoformat() if email_verified else None,
        "aud": "authenticated",
        "role": "authenticated",
        "exp": int(exp.timestamp()),
        "iat": int(now.timestamp()),
    }
    return jwt.encode(payload, secret, algorithm="HS256")


def make_settings(**overrides) -> Settings:
    """Settings isolated from the process environment and any .env file."""
    values = {
        "supabase_url": "https://test.supabase.co",
        "supabase_anon_key": "test-anon-key",
        "supabase_service_role_key": "test-service-key",
        "supabase_jwt_secret": TEST_JWT_SECRET,
        "environment": "development",
    }
    values.update(overrides)
    return Settings(_env_file=None, **values)


def db_result(data=None, count: Optional[int] = None) -> MagicMock:
    """A fake postgrest APIResponse."""
    result = MagicMock()
    result.data = [] if data is None else data
    result.count = count
    return result


QUERY_METHODS = ("select", "insert", "update", "delete", "eq", "or_", "order", "limit")


def query_chain(result=None) -> MagicMock:
    """
    A fake PostgREST query builder.

    Every builder method returns the builder itself, so filters can be
    asserted through call_args_list and execute() yields result.
    """
    query = MagicMock()
    for method in QUERY_METHODS:
        getattr(query, method).return_value = query
    query.execute.return_value = result if result is not None else db_result()
    return query


@pytest.fixture(autouse=True)
def reset_singletons():
    """Reset module-level singletons before and after each test."""
    def reset():
        reset_container()
        reset_auth_client_registry()
        reset_client_cache()
        get_settings.cache_clear()

    reset()
    yield
    reset()


@pytest.fixture
def test_user_id() -> str:
    """Provide a consistent test user ID."""
    return "test-user-123"


@pytest.fixture
def test_user_email() -> str:
    """Provide a consistent test user email."""
    return "test@example.com"


@pytest.fixture
def auth_token(test_user_id: str, test_user_email: str) -> str:
    """Create a valid auth token for testing."""
    return create_test_token(user_id=test_user_id, email=test_user_email)


@pytest.fixture
def auth_headers(auth_token: str) -> dict[str, str]:
    """Create authorization headers with a valid token."""
    return {"Authorization": f"Bearer {auth_token}"}


@pytest.fixture
def mock_db() -> MagicMock:
    """A MagicMock standing in for the Supabase client."""
    return MagicMock()
