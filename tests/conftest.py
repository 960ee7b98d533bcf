"""Shared test fixtures."""

from dataclasses import dataclass, field
from uuid import UUID

import pytest

from fit_forecast.adapters.weather_api_client import WeatherApiClient
from fit_forecast.config import Settings
from fit_forecast.containers import AppContainer
from fit_forecast.domain.errors import FitForecastError, PersistenceFailure
from fit_forecast.domain.outfits import Outfit
from fit_forecast.domain.preferences import UserPreferences
from fit_forecast.services.app_settings import AppSettingsService, SettingsRepository
from fit_forecast.services.outfits import OutfitRepository, OutfitStore
from fit_forecast.services.preferences import PreferencesRepository, PreferencesStore
from fit_forecast.services.weather import WeatherService


@dataclass
class InMemoryOutfitRepository(OutfitRepository):
    """In-memory outfit repository for tests."""

    outfits: list[Outfit] = field(default_factory=list)
    fail: bool = False

    def list_outfits(self) -> list[Outfit]:
        if self.fail:
            raise PersistenceFailure()
        return list(self.outfits)

    def create_outfit(self, outfit: Outfit) -> None:
        if self.fail:
            raise PersistenceFailure()
        self.outfits.append(outfit)

    def delete_outfit(self, outfit_id: UUID) -> None:
        if self.fail:
            raise PersistenceFailure()
        self.outfits = [item for item in self.outfits if item.id != outfit_id]


@dataclass
class InMemoryPreferencesRepository(PreferencesRepository):
    """In-memory preferences repository for tests."""

    records: dict[str, UserPreferences] = field(default_factory=dict)

    def get_preferences(self) -> UserPreferences | None:
        return self.records.get("user_preferences")

    def upsert_preferences(self, preferences: UserPreferences) -> None:
        self.records["user_preferences"] = preferences


@dataclass
class InMemorySettingsRepository(SettingsRepository):
    """In-memory key-value settings repository for tests."""

    values: dict[str, str] = field(default_factory=dict)

    def get_value(self, key: str) -> str | None:
        return self.values.get(key)

    def set_value(self, key: str, value: str) -> None:
        self.values[key] = value


@dataclass
class FakeWeatherApiClient(WeatherApiClient):
    """Fake weather client with in-memory responses."""

    current_payload: dict[str, object] = field(
        default_factory=lambda: {
            "location": {"name": "London"},
            "current": {
                "temp_f": 71.6,
                "condition": {"text": "Partly cloudy", "icon": "//cdn/116.png"},
            },
        }
    )
    forecast_payload: dict[str, object] = field(
        default_factory=lambda: {
            "forecast": {
                "forecastday": [
                    {
                        "hour": [
                            {
                                "time": "2025-04-20 08:00",
                                "temp_f": 58.1,
                                "condition": {"text": "Light drizzle"},
                            },
                            {
                                "time": "2025-04-20 12:00",
                                "temp_f": 66.0,
                                "condition": {"text": "Sunny"},
                            },
                            {
                                "time": "2025-04-20 18:00",
                                "temp_f": 61.4,
                                "condition": {"text": "Thundery outbreaks possible"},
                            },
                        ]
                    }
                ]
            }
        }
    )
    error: FitForecastError | None = None
    queries: list[str] = field(default_factory=list)

    async def get_current(self, city: str) -> dict[str, object]:
        self.queries.append(city)
        if self.error is not None:
            raise self.error
        return self.current_payload

    async def get_forecast(self, city: str, days: int = 1) -> dict[str, object]:
        self.queries.append(city)
        if self.error is not None:
            raise self.error
        return self.forecast_payload


@pytest.fixture
def settings(tmp_path) -> Settings:
    return Settings(
        weather_api_key="test-key",
        weather_api_base_url="https://weather.test/v1",
        storage_backend="sqlite",
        database_path=str(tmp_path / "fit_forecast.db"),
    )


@pytest.fixture
def weather_client() -> FakeWeatherApiClient:
    return FakeWeatherApiClient()


@pytest.fixture
def container(settings: Settings, weather_client: FakeWeatherApiClient) -> AppContainer:
    async def close_resources() -> None:
        return None

    return AppContainer(
        settings=settings,
        weather_service=WeatherService(weather_client),
        outfit_store=OutfitStore(InMemoryOutfitRepository()),
        preferences_store=PreferencesStore(InMemoryPreferencesRepository()),
        app_settings_service=AppSettingsService(InMemorySettingsRepository()),
        close_resources=close_resources,
    )
