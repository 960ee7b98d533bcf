"""Request and response models for the HTTP API."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, Field

from fit_forecast.domain.calendar import CalendarEvent, EventForecast
from fit_forecast.domain.outfits import Outfit
from fit_forecast.domain.preferences import AppSettings, UserPreferences
from fit_forecast.domain.recommendations import OutfitRecommendation
from fit_forecast.domain.weather import WeatherReading


class CurrentWeatherOut(BaseModel):
    """Current conditions for a city."""

    city: str
    temperature_f: float
    display_temperature: int
    condition: str
    weather: str

    @classmethod
    def from_reading(cls, city: str, reading: WeatherReading) -> "CurrentWeatherOut":
        return cls(
            city=city,
            temperature_f=reading.temperature_f,
            display_temperature=reading.display_temperature,
            condition=reading.condition,
            weather=reading.display,
        )


class HourOut(BaseModel):
    """One forecast hour."""

    time: datetime
    weather: str


class HourlyWeatherOut(BaseModel):
    """Today's hourly forecast."""

    city: str
    hours: list[HourOut]


class RecommendationOut(BaseModel):
    """Outfit recommendation for a weather string."""

    weather: str
    category: str
    description: str
    tags: list[str]
    emoji: str
    reason: str

    @classmethod
    def from_domain(cls, recommendation: OutfitRecommendation) -> "RecommendationOut":
        return cls(
            weather=recommendation.weather,
            category=recommendation.category.value,
            description=recommendation.description,
            tags=recommendation.tags,
            emoji=recommendation.emoji,
            reason=recommendation.reason,
        )


class CalendarEventIn(BaseModel):
    """Calendar event supplied by the client."""

    title: str
    start: datetime
    end: datetime
    location: str | None = None
    is_all_day: bool = False

    def to_domain(self) -> CalendarEvent:
        return CalendarEvent(
            title=self.title,
            start=self.start,
            end=self.end,
            location=self.location,
            is_all_day=self.is_all_day,
        )


class EventForecastRequest(BaseModel):
    """Events to match against a city's hourly forecast."""

    city: str
    events: list[CalendarEventIn] = Field(default_factory=list)


class EventForecastOut(BaseModel):
    """Advice for a single event."""

    title: str
    start: datetime
    location: str | None
    weather: str
    recommendation: str
    emoji: str

    @classmethod
    def from_domain(cls, forecast: EventForecast) -> "EventForecastOut":
        return cls(
            title=forecast.event.title,
            start=forecast.event.start,
            location=forecast.event.location,
            weather=forecast.weather,
            recommendation=forecast.recommendation,
            emoji=forecast.emoji,
        )


class EventForecastResponse(BaseModel):
    """Per-event advice in input order."""

    city: str
    forecasts: list[EventForecastOut]


class OutfitIn(BaseModel):
    """Outfit to save."""

    name: str = Field(min_length=1)
    description: str = ""
    image_name: str = ""
    location: str = ""
    allow_duplicate: bool = False

    def to_domain(self) -> Outfit:
        return Outfit(
            name=self.name,
            description=self.description,
            image_name=self.image_name,
            location=self.location,
        )


class OutfitOut(BaseModel):
    """Saved outfit."""

    id: UUID
    name: str
    description: str
    image_name: str
    location: str

    @classmethod
    def from_domain(cls, outfit: Outfit) -> "OutfitOut":
        return cls(
            id=outfit.id,
            name=outfit.name,
            description=outfit.description,
            image_name=outfit.image_name,
            location=outfit.location,
        )


class PreferencesBody(BaseModel):
    """User preferences payload."""

    weather_sensitivity: float = Field(default=0.5, allow_inf_nan=False)
    prefers_casual: bool = True

    @classmethod
    def from_domain(cls, preferences: UserPreferences) -> "PreferencesBody":
        return cls(
            weather_sensitivity=preferences.weather_sensitivity,
            prefers_casual=preferences.prefers_casual,
        )

    def to_domain(self) -> UserPreferences:
        return UserPreferences(
            weather_sensitivity=self.weather_sensitivity,
            prefers_casual=self.prefers_casual,
        )


class SettingsOut(BaseModel):
    """Current app settings."""

    dark_mode: bool
    notifications_enabled: bool
    last_used_city: str

    @classmethod
    def from_domain(cls, settings: AppSettings) -> "SettingsOut":
        return cls(
            dark_mode=settings.dark_mode,
            notifications_enabled=settings.notifications_enabled,
            last_used_city=settings.last_used_city,
        )


class SettingsUpdate(BaseModel):
    """Partial settings update; omitted fields are left alone."""

    dark_mode: bool | None = None
    notifications_enabled: bool | None = None
    last_used_city: str | None = None
