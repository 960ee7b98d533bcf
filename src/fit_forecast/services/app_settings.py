"""App-level toggles stored as key-value pairs."""

from dataclasses import dataclass
from typing import Protocol

from fit_forecast.domain.preferences import AppSettings

DARK_MODE_KEY = "darkMode"
NOTIFICATIONS_KEY = "notificationsEnabled"
LAST_CITY_KEY = "lastUsedCity"


class SettingsRepository(Protocol):
    """Persistence interface for simple key-value settings."""

    def get_value(self, key: str) -> str | None:
        """Return the stored value for a key."""

    def set_value(self, key: str, value: str) -> None:
        """Store a value under a key."""


@dataclass
class AppSettingsService:
    """Service for dark mode, notifications and the last used city."""

    repository: SettingsRepository

    def get(self) -> AppSettings:
        """Return all settings, falling back to defaults for missing keys."""
        defaults = AppSettings()
        return AppSettings(
            dark_mode=self._get_bool(DARK_MODE_KEY, defaults.dark_mode),
            notifications_enabled=self._get_bool(
                NOTIFICATIONS_KEY, defaults.notifications_enabled
            ),
            last_used_city=self.repository.get_value(LAST_CITY_KEY)
            or defaults.last_used_city,
        )

    def set_dark_mode(self, enabled: bool) -> None:
        """Persist the dark mode preference."""
        self.repository.set_value(DARK_MODE_KEY, _format_bool(enabled))

    def set_notifications_enabled(self, enabled: bool) -> None:
        """Persist the daily notification toggle."""
        self.repository.set_value(NOTIFICATIONS_KEY, _format_bool(enabled))

    def set_last_used_city(self, city: str) -> None:
        """Remember the last city the user looked up."""
        cleaned = city.strip()
        if cleaned:
            self.repository.set_value(LAST_CITY_KEY, cleaned)

    def _get_bool(self, key: str, default: bool) -> bool:
        raw = self.repository.get_value(key)
        if raw is None:
            return default
        return raw == "true"


def _format_bool(value: bool) -> str:
    return "true" if value else "false"
