"""Centralized application settings using pydantic settings."""

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Environment-aware configuration (listen address, shared secret, paging)."""

    app_name: str = "Product API"
    log_level: str = "INFO"

    host: str = Field(default="0.0.0.0", description="Interface to bind")
    port: int = Field(default=3000, description="Listen port (PORT)")

    # Shared secret compared against the x-api-key header
    api_key: str = Field(default="mysecurekey", description="Static API key (API_KEY)")
    api_key_header: str = "x-api-key"

    default_page: int = Field(default=1, ge=1)
    default_limit: int = Field(default=5, ge=1)

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )


@lru_cache
def get_settings() -> Settings:
    """Provide singleton-like access for dependency injection."""
    return Settings()
