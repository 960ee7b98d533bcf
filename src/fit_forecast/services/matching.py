"""Match calendar events to the nearest forecast hour."""

from collections.abc import Mapping, Sequence
from datetime import datetime

from fit_forecast.domain.calendar import CalendarEvent, EventForecast
from fit_forecast.domain.weather import WeatherReading
from fit_forecast.services.recommendations import recommend_for_event

NO_FORECAST = "No forecast"


def match_events(
    events: Sequence[CalendarEvent],
    hourly: Mapping[datetime, WeatherReading],
) -> list[EventForecast]:
    """Attach the closest forecast hour and advice to each event, in order."""
    hours = sorted(hourly, key=_wall_clock)
    forecasts: list[EventForecast] = []
    for event in events:
        nearest = _nearest_hour(hours, event.start)
        weather = hourly[nearest].display if nearest is not None else NO_FORECAST
        text, emoji = recommend_for_event(weather, event.title)
        forecasts.append(
            EventForecast(event=event, weather=weather, recommendation=text, emoji=emoji)
        )
    return forecasts


def _nearest_hour(hours: list[datetime], start: datetime) -> datetime | None:
    """Return the hour closest to ``start``; the earlier one wins a tie."""
    target = _wall_clock(start)
    best: datetime | None = None
    best_distance: float | None = None
    for hour in hours:
        distance = abs((_wall_clock(hour) - target).total_seconds())
        if best_distance is None or distance < best_distance:
            best = hour
            best_distance = distance
    return best


def _wall_clock(value: datetime) -> datetime:
    # Forecast hours are naive local times of the queried city.
    return value.replace(tzinfo=None)
