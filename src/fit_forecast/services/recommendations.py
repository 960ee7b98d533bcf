"""Rule-based outfit recommendations from a weather string.

Every function here is pure: it only looks at the normalized weather string
(``"72°F, Partly cloudy"``) and, for events, the event title. Conditions are
matched case-insensitively by substring in a fixed precedence order, so a
string like ``"Light snow showers"`` always lands in the snow bucket even
though it also mentions showers.
"""

import re
from dataclasses import dataclass

from fit_forecast.domain.recommendations import OutfitRecommendation, WeatherCategory

HOT_THRESHOLD_F = 75

OUTDOOR_KEYWORDS = frozenset(
    {"park", "hike", "walking", "run", "jog", "picnic", "outdoor", "garden"}
)

# Order matters: first match wins.
_CATEGORY_KEYWORDS: tuple[tuple[WeatherCategory, tuple[str, ...]], ...] = (
    (WeatherCategory.SNOW, ("snow",)),
    (WeatherCategory.RAIN, ("rain", "drizzle")),
    (WeatherCategory.STORM, ("storm", "thunder")),
    (WeatherCategory.CLOUD, ("cloud", "overcast")),
    (WeatherCategory.SUNNY, ("sunny", "clear")),
)

_LEADING_TEMPERATURE = re.compile(r"^\s*(-?\d+)\s*°")


@dataclass(frozen=True)
class _Advice:
    description: str
    tags: tuple[str, ...]
    emoji: str
    reason: str
    outdoor_text: str
    indoor_text: str


_ADVICE: dict[str, _Advice] = {
    "snow": _Advice(
        description="Winter Layers: heavy coat, thermal layers, waterproof boots",
        tags=("Heavy coat", "Thermal layers", "Waterproof boots", "Gloves", "Beanie"),
        emoji="🧥 + 🧤",
        reason="Snow is falling, so insulated and waterproof layers keep you warm and dry.",
        outdoor_text=(
            "Snow is expected during your plans outside. Bundle up in a heavy "
            "coat, gloves and waterproof boots."
        ),
        indoor_text="Snow outside. Wear a warm coat and boots for the trip there.",
    ),
    "rain": _Advice(
        description="Rainy Day: raincoat, long pants, water-resistant shoes",
        tags=("Raincoat", "Umbrella", "Water-resistant shoes", "Long pants"),
        emoji="🧥 + ☔",
        reason="Rain is in the forecast, so a waterproof outer layer matters most.",
        outdoor_text=(
            "Rain is likely. Bring a raincoat and umbrella, or think about "
            "moving it indoors."
        ),
        indoor_text="Rain on the way there. Grab an umbrella and a raincoat.",
    ),
    "storm": _Advice(
        description="Storm Ready: waterproof jacket, sturdy boots",
        tags=("Waterproof jacket", "Sturdy boots", "Stay indoors if possible"),
        emoji="⛈️ + 🧥",
        reason="Storms bring wind and heavy rain, so cover up and limit time outside.",
        outdoor_text="Storms are forecast. Consider rescheduling this outdoor event.",
        indoor_text=(
            "Storms are forecast. Allow extra travel time and bring a "
            "waterproof jacket."
        ),
    ),
    "cloud": _Advice(
        description="Cloudy Comfort: light jacket, long sleeves, jeans",
        tags=("Light jacket", "Long-sleeve shirt", "Jeans", "Sneakers"),
        emoji="🧥 + 👖",
        reason="Clouds keep it cooler, so a light layer is enough.",
        outdoor_text="Overcast skies. A light jacket will keep you comfortable outside.",
        indoor_text="Cloudy out. A light jacket is plenty.",
    ),
    "hot": _Advice(
        description="Summer Vibes: T-Shirt, Shorts, Sneakers",
        tags=("T-shirt", "Shorts", "Sunglasses", "Sunscreen", "Sneakers"),
        emoji="👕 + 🩳",
        reason="It is hot and sunny, so breathable clothes and sun protection help.",
        outdoor_text=(
            "Hot and sunny. Wear breathable clothes and sunscreen, and bring water."
        ),
        indoor_text="Hot outside. Dress light for getting there.",
    ),
    "pleasant": _Advice(
        description="Easy Breezy: T-Shirt, Light Pants, Sneakers",
        tags=("T-shirt", "Light pants", "Sneakers", "Light layer"),
        emoji="👕 + 👖",
        reason="Clear skies and mild temperatures call for light, comfortable clothes.",
        outdoor_text=(
            "Great weather for being outside. A t-shirt and light pants are perfect."
        ),
        indoor_text="Pleasant weather. Dress comfortably.",
    ),
    "default": _Advice(
        description="Everyday Layers: comfortable top, jeans, sneakers",
        tags=("Comfortable layers", "Jeans", "Sneakers"),
        emoji="👕 + 🧥",
        reason="Conditions are mixed, so layers let you adjust through the day.",
        outdoor_text="Check the sky before heading out and dress in comfortable layers.",
        indoor_text="Dress in comfortable layers.",
    ),
}


def classify_weather(weather: str) -> WeatherCategory:
    """Return the first matching condition bucket for a weather string."""
    lowered = weather.lower()
    for category, keywords in _CATEGORY_KEYWORDS:
        if any(keyword in lowered for keyword in keywords):
            return category
    return WeatherCategory.DEFAULT


def parse_temperature(weather: str) -> int | None:
    """Parse the leading integer temperature from ``"<int>°F, ..."``."""
    match = _LEADING_TEMPERATURE.match(weather)
    if match is None:
        return None
    return int(match.group(1))


def is_outdoor_event(title: str) -> bool:
    """Return True when the event title suggests being outside."""
    lowered = title.lower()
    return any(keyword in lowered for keyword in OUTDOOR_KEYWORDS)


def recommend_tags(weather: str) -> list[str]:
    """Return clothing tags for the weather."""
    return list(_advice_for(weather).tags)


def recommend_reason(weather: str) -> str:
    """Explain why the outfit fits the weather."""
    return _advice_for(weather).reason


def recommend_emoji(weather: str) -> str:
    """Return the emoji pair for the weather."""
    return _advice_for(weather).emoji


def recommend_description(weather: str) -> str:
    """Return the outfit name and its main pieces."""
    return _advice_for(weather).description


def recommend_for_event(weather: str, event_title: str) -> tuple[str, str]:
    """Return advice text and emoji for an event under the given weather."""
    advice = _advice_for(weather)
    if is_outdoor_event(event_title):
        return advice.outdoor_text, advice.emoji
    return advice.indoor_text, advice.emoji


def recommend(weather: str) -> OutfitRecommendation:
    """Bundle every recommendation for the weather."""
    advice = _advice_for(weather)
    return OutfitRecommendation(
        weather=weather,
        category=classify_weather(weather),
        description=advice.description,
        tags=list(advice.tags),
        emoji=advice.emoji,
        reason=advice.reason,
    )


def _advice_for(weather: str) -> _Advice:
    category = classify_weather(weather)
    if category is WeatherCategory.SUNNY:
        temperature = parse_temperature(weather)
        if temperature is not None and temperature > HOT_THRESHOLD_F:
            return _ADVICE["hot"]
        return _ADVICE["pleasant"]
    return _ADVICE[category.value]
