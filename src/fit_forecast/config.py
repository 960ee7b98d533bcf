"""Application configuration."""

import os

from pydantic_settings import BaseSettings, SettingsConfigDict

_ENVIRONMENT = os.getenv("ENVIRONMENT", "local")

STORAGE_BACKENDS = frozenset({"sqlite", "supabase"})


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    weather_api_key: str
    weather_api_base_url: str = "https://api.weatherapi.com/v1"
    storage_backend: str = "sqlite"
    database_path: str = "data/fit_forecast.db"
    supabase_url: str | None = None
    supabase_service_key: str | None = None
    environment: str = _ENVIRONMENT
    log_level: str = "INFO"

    model_config = SettingsConfigDict(
        env_file=(f".env.{_ENVIRONMENT}", ".env"),
        extra="ignore",
    )


def parse_storage_backend(raw: str | None) -> str:
    """Normalize the storage backend name, defaulting to sqlite."""
    if raw is None:
        return "sqlite"
    cleaned = raw.strip().lower()
    if not cleaned:
        return "sqlite"
    if cleaned not in STORAGE_BACKENDS:
        raise ValueError(f"Unknown storage backend: {raw}")
    return cleaned
