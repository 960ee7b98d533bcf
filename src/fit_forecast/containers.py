"""Dependency container wiring for the application."""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass

from supabase import create_client

from fit_forecast.adapters.sqlite_repositories import (
    SqliteDatabase,
    SqliteOutfitRepository,
    SqlitePreferencesRepository,
    SqliteSettingsRepository,
)
from fit_forecast.adapters.supabase_outfit_repository import SupabaseOutfitRepository
from fit_forecast.adapters.supabase_preferences_repository import (
    SupabasePreferencesRepository,
)
from fit_forecast.adapters.supabase_settings_repository import (
    SupabaseSettingsRepository,
)
from fit_forecast.adapters.weather_api_client import HttpxWeatherApiClient
from fit_forecast.config import Settings, parse_storage_backend
from fit_forecast.services.app_settings import AppSettingsService, SettingsRepository
from fit_forecast.services.outfits import OutfitRepository, OutfitStore
from fit_forecast.services.preferences import PreferencesRepository, PreferencesStore
from fit_forecast.services.weather import WeatherService


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    weather_service: WeatherService
    outfit_store: OutfitStore
    preferences_store: PreferencesStore
    app_settings_service: AppSettingsService
    close_resources: Callable[[], Awaitable[None]]


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container.

    Raises ``PersistenceFailure`` if the local database cannot be opened.
    """
    resolved_settings = settings or Settings()
    outfit_repository, preferences_repository, settings_repository = (
        _build_repositories(resolved_settings)
    )
    weather_client = HttpxWeatherApiClient.create(
        api_key=resolved_settings.weather_api_key,
        base_url=resolved_settings.weather_api_base_url,
    )
    outfit_store = OutfitStore(outfit_repository)
    outfit_store.refresh()

    async def close_resources() -> None:
        await weather_client.close()

    return AppContainer(
        settings=resolved_settings,
        weather_service=WeatherService(weather_client),
        outfit_store=outfit_store,
        preferences_store=PreferencesStore(preferences_repository),
        app_settings_service=AppSettingsService(settings_repository),
        close_resources=close_resources,
    )


def _build_repositories(
    settings: Settings,
) -> tuple[OutfitRepository, PreferencesRepository, SettingsRepository]:
    backend = parse_storage_backend(settings.storage_backend)
    if backend == "supabase":
        if not settings.supabase_url or not settings.supabase_service_key:
            raise ValueError("Supabase backend requires SUPABASE_URL and key")
        client = create_client(settings.supabase_url, settings.supabase_service_key)
        return (
            SupabaseOutfitRepository(client),
            SupabasePreferencesRepository(client),
            SupabaseSettingsRepository(client),
        )
    database = SqliteDatabase(settings.database_path)
    return (
        SqliteOutfitRepository(database),
        SqlitePreferencesRepository(database),
        SqliteSettingsRepository(database),
    )
