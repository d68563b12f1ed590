"""Application configuration."""

import os

from pydantic_settings import BaseSettings, SettingsConfigDict

_ENVIRONMENT = os.getenv("ENVIRONMENT", "local")

STORAGE_BACKENDS = {"memory", "supabase"}


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    catalog_url: str = "https://api.jsonbin.io/v3/b/698184b543b1c97be96155bf"
    catalog_timeout_seconds: float = 15
    favorites_storage_key: str = "@FoodListingApp_favorites"
    storage_backend: str = "memory"
    supabase_url: str | None = None
    supabase_service_key: str | None = None
    supabase_kv_table: str = "kv_store"
    environment: str = _ENVIRONMENT

    model_config = SettingsConfigDict(
        env_file=(f".env.{_ENVIRONMENT}", ".env"),
        extra="ignore",
    )


def parse_storage_backend(raw: str) -> str:
    """Normalize and validate the configured storage backend name."""
    backend = raw.strip().lower()
    if backend not in STORAGE_BACKENDS:
        raise ValueError(f"Unknown storage backend: {raw!r}")
    return backend
