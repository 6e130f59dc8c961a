"""
Base repository class for database access.

Provides a common abstraction layer for all repositories, encapsulating
Supabase client access, the auth retry policy and translation of PostgREST
errors into ExternalServiceError.
"""

import logging
from typing import Any, Optional, TypeVar, Generic

from postgrest.exceptions import APIError
from supabase import Client

from .exceptions import ExternalServiceError
from .retry import RetryConfig, with_auth_retry

logger = logging.getLogger(__name__)

T = TypeVar("T")


class BaseRepository(Generic[T]):
    """
    Base class for all repositories.

    Provides common functionality for database operations:
    - Supabase client access via self._db
    - self._execute() running a query builder under the retry policy
    - Generic type parameter for model type hints

    Subclasses should implement domain-specific data access methods
    and handle dict-to-Pydantic model mapping internally.

    Example:
        class ArtworkRepository(BaseRepository[Artwork]):
            def get_by_id(self, artwork_id: str) -> Optional[Artwork]:
                query = self._db.table("artworks").select("*").eq("id", artwork_id)
                rows = self._execute(query, "get artwork").data
                return self._map_to_artwork(rows[0]) if rows else None
    """

    def __init__(self, db: Client, retry: Optional[RetryConfig] = None) -> None:
        """
        Initialize the repository with a Supabase client.

        Args:
            db: Supabase client instance for database operations.
            retry: Retry policy for auth failures (defaults to RetryConfig()).
        """
        self._db = db
        self._retry = retry or RetryConfig()

    def _execute(self, query: Any, operation_name: str) -> Any:
        """
        Execute a PostgREST query builder (or RPC) with the retry policy.

        Raises:
            ExternalServiceError: If Supabase rejects the request. The
                PostgREST/Postgres error code is kept in details["db_code"].
        """
        try:
            return with_auth_retry(query.execute, operation_name, self._retry)
        except APIError as e:
            logger.error("%s failed: %s", operation_name, e.message)
            raise ExternalServiceError(
                e.message or f"{operation_name} failed",
                service="supabase",
                code="DATABASE_ERROR",
                details={"db_code": e.code, "operation": operation_name},
            ) from e

    @staticmethod
    def _count(result: Any) -> int:
        """Read the exact count from a count="exact" response."""
        return result.count or 0
