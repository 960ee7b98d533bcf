"""User preferences service."""

import logging
from dataclasses import dataclass
from typing import Protocol

from fit_forecast.domain.preferences import UserPreferences

_logger = logging.getLogger(__name__)


class PreferencesRepository(Protocol):
    """Persistence interface for the singleton preferences record."""

    def get_preferences(self) -> UserPreferences | None:
        """Return the stored preferences, if any."""

    def upsert_preferences(self, preferences: UserPreferences) -> None:
        """Create or replace the single preferences record."""


@dataclass
class PreferencesStore:
    """Load and save the user's preferences."""

    repository: PreferencesRepository

    def load(self) -> UserPreferences:
        """Return stored preferences, creating the defaults on first use."""
        stored = self.repository.get_preferences()
        if stored is not None:
            return stored
        defaults = UserPreferences()
        self.repository.upsert_preferences(defaults)
        _logger.info("Created default preferences")
        return defaults

    def save(self, preferences: UserPreferences) -> None:
        """Persist preferences, replacing the existing record."""
        self.repository.upsert_preferences(preferences)
