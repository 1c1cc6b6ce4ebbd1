# =============================================================================
# app/config.py - Application Settings
# =============================================================================
# This module loads configuration from environment variables using pydantic-settings.
# It provides a single Settings class with all configuration values.
#
# Usage:
#   from app.config import settings
#   print(settings.CORS_MAX_AGE)
#
# Environment variables are loaded from:
# 1. System environment variables
# 2. .env file in project root (if exists)
# =============================================================================

from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


def _split_csv(value: str) -> list[str]:
    return [item.strip() for item in value.split(",") if item.strip()]


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    All settings are accessed via the global `settings` instance, or passed
    explicitly to `create_app()` when building an isolated application.
    """

    # -------------------------------------------------------------------------
    # Application Settings
    # -------------------------------------------------------------------------

    ENVIRONMENT: Literal["development", "staging", "production"] = Field(
        default="development",
        description="Current environment"
    )

    DEBUG: bool = Field(
        default=False,
        description="Enable debug mode (verbose logging)"
    )

    API_HOST: str = Field(
        default="0.0.0.0",
        description="Host to bind the API server to"
    )

    API_PORT: int = Field(
        default=8787,
        ge=1,
        le=65535,
        description="Port for the API server"
    )

    # -------------------------------------------------------------------------
    # Admin Authentication
    # -------------------------------------------------------------------------
    # ADMIN_PASSWORD is required - app won't start without it

    SECRET_KEY: str = Field(
        default="dev-secret-key-change-in-production",
        min_length=16,
        description="Secret key for signing admin session tokens"
    )

    ADMIN_USERNAME: str = Field(
        default="admin",
        min_length=1,
        description="Administrator login name"
    )

    ADMIN_PASSWORD: str = Field(
        ...,
        min_length=6,
        description="Initial administrator password"
    )

    ADMIN_TOKEN_TTL_HOURS: int = Field(
        default=24,
        ge=1,
        le=24 * 30,
        description="Lifetime of an admin session token"
    )

    API_KEY_HEADER: str = Field(
        default="X-API-KEY",
        description="Request header carrying end-user API keys"
    )

    # -------------------------------------------------------------------------
    # CORS
    # -------------------------------------------------------------------------
    # Comma-separated strings that get parsed by the *_list properties

    CORS_ORIGINS: str = Field(
        default="*",
        description="Allowed CORS origins (comma-separated)"
    )

    CORS_ALLOW_HEADERS: str = Field(
        default="Content-Type,Authorization,X-API-KEY",
        description="Headers accepted on cross-origin requests (comma-separated)"
    )

    CORS_ALLOW_METHODS: str = Field(
        default="GET,POST,PUT,DELETE,OPTIONS",
        description="Methods accepted on cross-origin requests (comma-separated)"
    )

    CORS_MAX_AGE: int = Field(
        default=86400,
        ge=0,
        description="Preflight cache lifetime in seconds"
    )

    # -------------------------------------------------------------------------
    # File Upload Settings
    # -------------------------------------------------------------------------

    MAX_UPLOAD_SIZE_MB: int = Field(
        default=100,
        ge=1,
        le=1024,
        description="Initial maximum file upload size in MB"
    )

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_ignore_empty=True,
        case_sensitive=True,
    )

    # -------------------------------------------------------------------------
    # Computed Properties
    # -------------------------------------------------------------------------

    @property
    def cors_origins_list(self) -> list[str]:
        """
        Parse CORS_ORIGINS string into a list.

        Example: "https://a.example, https://b.example" -> ["https://a.example", "https://b.example"]
        """
        return _split_csv(self.CORS_ORIGINS)

    @property
    def cors_allow_headers_list(self) -> list[str]:
        return _split_csv(self.CORS_ALLOW_HEADERS)

    @property
    def cors_allow_methods_list(self) -> list[str]:
        return [method.upper() for method in _split_csv(self.CORS_ALLOW_METHODS)]

    @property
    def is_production(self) -> bool:
        """Check if running in production mode."""
        return self.ENVIRONMENT == "production"


@lru_cache
def get_settings() -> Settings:
    """
    Get cached Settings instance.

    Using lru_cache ensures we only parse .env and validate once,
    not on every access.
    """
    return Settings()


# Global settings instance for easy importing
# Usage: from app.config import settings
settings = get_settings()
