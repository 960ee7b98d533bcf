"""Supabase repository for user preferences."""

from dataclasses import dataclass

from supabase import Client

from fit_forecast.adapters.supabase_errors import execute
from fit_forecast.domain.preferences import PREFERENCES_ID, UserPreferences
from fit_forecast.services.preferences import PreferencesRepository


@dataclass
class SupabasePreferencesRepository(PreferencesRepository):
    """Supabase implementation for the preferences record."""

    client: Client

    def get_preferences(self) -> UserPreferences | None:
        """Return the stored preferences row."""
        response = execute(
            self.client.table("user_preferences")
            .select("weather_sensitivity, prefers_casual")
            .eq("id", PREFERENCES_ID)
            .limit(1)
        )
        if not response.data:
            return None
        row = response.data[0]
        return UserPreferences(
            weather_sensitivity=float(row["weather_sensitivity"]),
            prefers_casual=bool(row["prefers_casual"]),
        )

    def upsert_preferences(self, preferences: UserPreferences) -> None:
        """Write the single preferences row."""
        execute(
            self.client.table("user_preferences").upsert(
                {
                    "id": PREFERENCES_ID,
                    "weather_sensitivity": preferences.weather_sensitivity,
                    "prefers_casual": preferences.prefers_casual,
                }
            )
        )
