"""Supabase repository for key-value app settings."""

from dataclasses import dataclass

from supabase import Client

from fit_forecast.adapters.supabase_errors import execute
from fit_forecast.services.app_settings import SettingsRepository


@dataclass
class SupabaseSettingsRepository(SettingsRepository):
    """Supabase implementation for app settings."""

    client: Client

    def get_value(self, key: str) -> str | None:
        """Return the stored value for a key."""
        response = execute(
            self.client.table("app_settings").select("value").eq("key", key).limit(1)
        )
        if not response.data:
            return None
        return response.data[0].get("value")

    def set_value(self, key: str, value: str) -> None:
        """Store a value for a key."""
        execute(self.client.table("app_settings").upsert({"key": key, "value": value}))
