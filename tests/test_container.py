"""Tests for container wiring and configuration."""

import asyncio

import pytest

from fit_forecast.adapters.sqlite_repositories import SqliteOutfitRepository
from fit_forecast.config import Settings, parse_storage_backend
from fit_forecast.containers import build_container


def test_build_container_creates_services(settings: Settings) -> None:
    container = build_container(settings)

    assert isinstance(container.outfit_store.repository, SqliteOutfitRepository)
    assert container.outfit_store.list() == []
    assert container.preferences_store.load().weather_sensitivity == 0.5
    asyncio.run(container.close_resources())


def test_supabase_backend_requires_credentials(settings: Settings) -> None:
    settings.storage_backend = "supabase"

    with pytest.raises(ValueError, match="SUPABASE_URL"):
        build_container(settings)


def test_parse_storage_backend() -> None:
    assert parse_storage_backend(None) == "sqlite"
    assert parse_storage_backend("  ") == "sqlite"
    assert parse_storage_backend(" Supabase ") == "supabase"
    with pytest.raises(ValueError):
        parse_storage_backend("mongo")
