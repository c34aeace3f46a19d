"""
Application configuration management.

Uses pydantic-settings for type-safe environment variable parsing.
All configuration is centralized here to support dependency injection
and avoid scattering os.getenv() calls throughout the codebase.
"""

from functools import lru_cache
from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Application settings with validation and type coercion.

    Values are loaded from environment variables or .env file.
    All fields have sensible defaults for local development.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Storage Backend Selection
    # Only the in-memory catalog exists for now
    storage_backend: Literal["memory"] = "memory"

    # Load the fixed initial catalog when the store is constructed
    seed_data: bool = True

    # Default cutoff for /api/articles/recent
    recent_articles_limit: int = 3

    # Server
    server_host: str = "0.0.0.0"
    server_port: int = 5000
    debug: bool = True
    cors_origins: list[str] = ["*"]

    # Environment
    environment: Literal["development", "staging", "production"] = "development"

    @property
    def is_development(self) -> bool:
        return self.environment == "development"


@lru_cache
def get_settings() -> Settings:
    """
    Cached settings singleton.

    Use this function to get settings instance throughout the application.
    The @lru_cache ensures we only parse environment once.
    """
    return Settings()


# Convenience export for direct import
settings = get_settings()
