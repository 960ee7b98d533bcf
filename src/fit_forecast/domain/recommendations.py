"""Recommendation domain models."""

from dataclasses import dataclass
from enum import Enum


class WeatherCategory(Enum):
    """Condition buckets in matching precedence order."""

    SNOW = "snow"
    RAIN = "rain"
    STORM = "storm"
    CLOUD = "cloud"
    SUNNY = "sunny"
    DEFAULT = "default"


@dataclass(frozen=True)
class OutfitRecommendation:
    """Everything the engine suggests for a weather string."""

    weather: str
    category: WeatherCategory
    description: str
    tags: list[str]
    emoji: str
    reason: str
