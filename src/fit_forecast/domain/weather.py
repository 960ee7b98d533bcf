"""Weather domain models."""

import math
from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class WeatherReading:
    """Single weather observation or forecast hour."""

    temperature_f: float
    condition: str
    observed_at: datetime | None = None

    @property
    def display_temperature(self) -> int:
        """Temperature rounded half-up to a whole degree."""
        return math.floor(self.temperature_f + 0.5)

    @property
    def display(self) -> str:
        """Normalized weather string, e.g. ``72°F, Sunny``."""
        return f"{self.display_temperature}°F, {self.condition}"
