"""Weather lookups and response parsing."""

import logging
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any

from pydantic import BaseModel, FiniteFloat, ValidationError, field_validator

from fit_forecast.adapters.weather_api_client import WeatherApiClient
from fit_forecast.domain.errors import DecodeFailure, FitForecastError, InvalidInput
from fit_forecast.domain.weather import WeatherReading
from fit_forecast.services.state import WeatherState

HOUR_TIME_FORMAT = "%Y-%m-%d %H:%M"

_logger = logging.getLogger(__name__)


class _Condition(BaseModel):
    text: str
    icon: str | None = None

    @field_validator("text")
    @classmethod
    def _not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("condition text is empty")
        return value


class _Current(BaseModel):
    temp_f: FiniteFloat
    condition: _Condition


class _CurrentResponse(BaseModel):
    current: _Current


class _Hour(BaseModel):
    time: str
    temp_f: FiniteFloat
    condition: _Condition


class _ForecastDay(BaseModel):
    hour: list[Any] = []


class _Forecast(BaseModel):
    forecastday: list[_ForecastDay]


class _ForecastResponse(BaseModel):
    forecast: _Forecast


@dataclass
class WeatherService:
    """Fetch weather for a city and normalize it into readings."""

    client: WeatherApiClient
    state: WeatherState = field(default_factory=WeatherState)

    async def fetch_current(self, city: str) -> WeatherReading:
        """Return current conditions for a city."""
        query = _validate_city(city)
        payload = await self.client.get_current(query)
        try:
            parsed = _CurrentResponse.model_validate(payload)
        except ValidationError as exc:
            raise DecodeFailure() from exc
        return WeatherReading(
            temperature_f=parsed.current.temp_f,
            condition=parsed.current.condition.text,
        )

    async def fetch_hourly(self, city: str) -> dict[datetime, WeatherReading]:
        """Return today's forecast keyed by local hour.

        Hours that fail to parse are skipped so a partial forecast is still
        usable.
        """
        query = _validate_city(city)
        payload = await self.client.get_forecast(query, days=1)
        try:
            parsed = _ForecastResponse.model_validate(payload)
        except ValidationError as exc:
            raise DecodeFailure() from exc

        hourly: dict[datetime, WeatherReading] = {}
        skipped = 0
        for day in parsed.forecast.forecastday:
            for raw_hour in day.hour:
                reading = _parse_hour(raw_hour)
                if reading is None:
                    skipped += 1
                    continue
                hourly[reading.observed_at] = reading
        if skipped:
            _logger.info("Skipped %s unparseable forecast hours for %s", skipped, query)
        return hourly

    async def describe_current(self, city: str) -> str:
        """Return the display text for a city's weather, never raising.

        The text is also published to the shared weather state; when two
        lookups overlap, the last one to finish wins.
        """
        try:
            reading = await self.fetch_current(city)
        except FitForecastError as exc:
            _logger.warning("Weather lookup failed for %r: %s", city, exc.user_message)
            text = exc.user_message
        else:
            text = reading.display
        self.state.publish(text)
        return text


def _validate_city(city: str) -> str:
    cleaned = city.strip()
    if not cleaned:
        raise InvalidInput()
    try:
        cleaned.encode("utf-8")
    except UnicodeEncodeError as exc:
        raise InvalidInput() from exc
    return cleaned


def _parse_hour(raw_hour: Any) -> WeatherReading | None:
    try:
        hour = _Hour.model_validate(raw_hour)
        observed_at = datetime.strptime(hour.time, HOUR_TIME_FORMAT)
    except (ValidationError, ValueError):
        return None
    return WeatherReading(
        temperature_f=hour.temp_f,
        condition=hour.condition.text,
        observed_at=observed_at,
    )
