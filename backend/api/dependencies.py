"""
Dependency injection setup for FastAPI.

This module provides the "container" that wires together all module
implementations. Each module exposes its service through an interface,
and this file creates the concrete implementations.
"""

from functools import partial
from typing import TYPE_CHECKING

# Type checking imports for interfaces (avoids circular imports)
if TYPE_CHECKING:
    from supabase import Client
    from modules.auth.interfaces import IAuthService
    from modules.auth.repository import ProfileRepository
    from modules.artworks.interfaces import IArtworkService
    from modules.artworks.repository import ArtworkRepository
    from modules.images.service import ImageStorage
    from modules.search.service import SearchService
    from modules.admin.service import AdminService
    from shared.auth_client import AuthClientRegistry


class ServiceContainer:
    """
    Container for all service instances.

    This class manages the lifecycle of service instances and their
    dependencies. Services are created lazily on first access.

    All services are cached as singletons within the container.
    Use reset() to clear all cached services for testing.
    """

    def __init__(self) -> None:
        self._db: "Client | None" = None
        self._auth_service: "IAuthService | None" = None
        self._profile_repository: "ProfileRepository | None" = None
        self._artwork_repository: "ArtworkRepository | None" = None
        self._artwork_service: "IArtworkService | None" = None
        self._image_storage: "ImageStorage | None" = None
        self._search_service: "SearchService | None" = None
        self._admin_service: "AdminService | None" = None

    @property
    def db(self) -> "Client":
        """Service-role Supabase client."""
        if self._db is None:
            from shared.database import get_supabase_client
            self._db = get_supabase_client()
        return self._db

    @property
    def auth_clients(self) -> "AuthClientRegistry":
        """The process-wide auth client registry (never reset by the container)."""
        from shared.auth_client import get_auth_client_registry
        return get_auth_client_registry()

    def _retry_config(self):
        from shared.config import get_settings
        from shared.retry import RetryConfig
        settings = get_settings()
        return RetryConfig(max_attempts=settings.retry_max_attempts, delay=settings.retry_delay)

    def _url_formatter(self):
        from modules.images.urls import format_storage_url
        from shared.config import get_settings
        settings = get_settings()
        return partial(
            format_storage_url,
            base_url=settings.supabase_url,
            buckets=tuple(settings.storage_buckets),
            default_bucket=settings.artwork_bucket,
        )

    @property
    def auth(self) -> "IAuthService":
        """Get the auth service instance."""
        if self._auth_service is None:
            from modules.auth.service import AuthService
            registry = self.auth_clients
            self._auth_service = AuthService(
                auth_client=registry.get,
                profiles_factory=lambda: self.profile_repository,
            )
        return self._auth_service

    @property
    def profile_repository(self) -> "ProfileRepository":
        if self._profile_repository is None:
            from modules.auth.repository import ProfileRepository
            self._profile_repository = ProfileRepository(self.db, self._retry_config())
        return self._profile_repository

    @property
    def artwork_repository(self) -> "ArtworkRepository":
        """Get the artwork repository instance."""
        if self._artwork_repository is None:
            from modules.artworks.repository import ArtworkRepository
            self._artwork_repository = ArtworkRepository(
                self.db,
                url_formatter=self._url_formatter(),
                retry=self._retry_config(),
            )
        return self._artwork_repository

    @property
    def images(self) -> "ImageStorage":
        """Get the image storage service instance."""
        if self._image_storage is None:
            from modules.images.service import ImageStorage
            from shared.config import get_settings
            settings = get_settings()
            self._image_storage = ImageStorage(
                self.db,
                self.artwork_repository,
                url_formatter=self._url_formatter(),
                bucket=settings.artwork_bucket,
                cache_control=settings.image_cache_control,
            )
        return self._image_storage

    @property
    def artworks(self) -> "IArtworkService":
        """Get the artwork service instance."""
        if self._artwork_service is None:
            from modules.artworks.service import ArtworkService
            self._artwork_service = ArtworkService(
                repository=self.artwork_repository,
                images=self.images,
            )
        return self._artwork_service

    @property
    def search(self) -> "SearchService":
        """Get the search service instance."""
        if self._search_service is None:
            from modules.search.service import SearchService
            self._search_service = SearchService(self.artwork_repository)
        return self._search_service

    @property
    def admin(self) -> "AdminService":
        """Get the admin service instance."""
        if self._admin_service is None:
            from modules.admin.repository import AdminRepository
            from modules.admin.service import AdminService
            self._admin_service = AdminService(
                repository=AdminRepository(self.db, self._retry_config()),
                profiles=self.profile_repository,
                artworks=self.artwork_repository,
                artwork_service=self.artworks,
            )
        return self._admin_service

    def reset(self) -> None:
        """
        Reset all cached services.

        This is primarily for testing - allows tests to get fresh
        service instances with different mock dependencies.
        """
        self._db = None
        self._auth_service = None
        self._profile_repository = None
        self._artwork_repository = None
        self._artwork_service = None
        self._image_storage = None
        self._search_service = None
        self._admin_service = None


# Module-level container singleton
_container: ServiceContainer | None = None


def get_container() -> ServiceContainer:
    """Get the singleton service container."""
    global _container
    if _container is None:
        _container = ServiceContainer()
    return _container


def reset_container() -> None:
    """
    Reset the service container.

    This clears the cached container, so the next call to get_container()
    will create a fresh container with new service instances.

    Primarily used for testing.
    """
    global _container
    _container = None


# FastAPI dependency functions
# These are the functions that should be used in route Depends() calls


def get_auth_service() -> "IAuthService":
    """FastAPI dependency for auth service."""
    return get_container().auth


def get_artwork_service() -> "IArtworkService":
    """FastAPI dependency for artwork service."""
    return get_container().artworks


def get_search_service() -> "SearchService":
    """FastAPI dependency for search service."""
    return get_container().search


def get_admin_service() -> "AdminService":
    """FastAPI dependency for admin service."""
    return get_container().admin


def get_database() -> "Client":
    """FastAPI dependency for the service-role client."""
    return get_container().db
