"""
Database client factory for Supabase.

Provides the service-role client used by every repository (RLS is
bypassed, so ownership checks live in the service layer).
The long-lived auth client lives in shared.auth_client.
"""

import logging
from typing import Optional
from supabase import create_client, Client, ClientOptions

from .config import get_settings

logger = logging.getLogger(__name__)

# Module-level client cache
_service_client: Optional[Client] = None


def get_supabase_client() -> Client:
    """
    Get Supabase client with service role (bypasses RLS).

    Use this for moderation, curation and submission proxies that need
    full table access. The client never persists or refreshes a session.

    Returns:
        Supabase client configured with service role key
    """
    global _service_client

    if _service_client is None:
        settings = get_settings()
        if not settings.supabase_url or not settings.supabase_service_role_key:
            raise RuntimeError(
                "Supabase configuration missing. "
                "Set SUPABASE_URL and SUPABASE_SERVICE_ROLE_KEY environment variables."
            )
        logger.info("Creating service-role Supabase client")
        _service_client = create_client(
            settings.supabase_url,
            settings.supabase_service_role_key,
            options=ClientOptions(
                auto_refresh_token=False,
                persist_session=False,
            ),
        )

    return _service_client


def reset_client_cache() -> None:
    """
    Reset the cached database client.

    Useful for testing or when configuration changes.
    """
    global _service_client
    _service_client = None
