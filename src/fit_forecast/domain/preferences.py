"""Domain models for user preferences and app settings."""

import math
from dataclasses import dataclass

PREFERENCES_ID = "user_preferences"


@dataclass(frozen=True)
class UserPreferences:
    """Singleton preference record."""

    weather_sensitivity: float = 0.5
    prefers_casual: bool = True

    def __post_init__(self) -> None:
        value = float(self.weather_sensitivity)
        if math.isnan(value):
            raise ValueError("weather_sensitivity must be a number")
        object.__setattr__(self, "weather_sensitivity", min(max(value, 0.0), 1.0))


@dataclass(frozen=True)
class AppSettings:
    """Simple key-value backed toggles."""

    dark_mode: bool = True
    notifications_enabled: bool = False
    last_used_city: str = ""
