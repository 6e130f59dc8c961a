"""
Centralized configuration for the AI Curator backend.

All settings are loaded from environment variables with sensible defaults.
Supabase credentials have no defaults: a missing key fails loudly instead of
falling back to a value committed to the repository.
"""

from functools import lru_cache
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Application
    app_name: str = "AI Curator API"
    app_version: str = "0.1.0"
    debug: bool = False
    environment: str = "development"
    log_level: str = "INFO"

    # Server
    host: str = "0.0.0.0"
    port: int = 8000
    reload: bool = False

    # CORS settings
    cors_origins: list[str] = ["http://localhost:3000", "http://localhost:8888"]
    cors_allow_credentials: bool = True
    cors_allow_methods: list[str] = ["*"]
    cors_allow_headers: list[str] = ["*"]

    # Supabase
    supabase_url: str = ""
    supabase_anon_key: str = ""
    supabase_service_role_key: str = ""
    supabase_jwt_secret: str = ""

    # Auth client
    auth_auto_refresh: bool = False

    # Storage
    artwork_bucket: str = "artwork-images"
    storage_buckets: list[str] = ["artwork-images", "avatars", "profiles"]
    image_cache_control: str = "3600"

    # Retry policy for backend calls failing with auth errors
    retry_max_attempts: int = 3
    retry_delay: float = 1.0  # seconds, multiplied by the attempt number

    @property
    def env_prefix(self) -> str:
        """Short environment tag used to namespace auth storage keys."""
        return "prod" if self.environment.lower() == "production" else "dev"


@lru_cache
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Uses lru_cache to ensure settings are only loaded once.
    """
    return Settings()
