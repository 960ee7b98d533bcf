"""Calendar event models and per-event forecasts."""

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class CalendarEvent:
    """Event supplied by the calendar collaborator."""

    title: str
    start: datetime
    end: datetime
    location: str | None = None
    is_all_day: bool = False


@dataclass(frozen=True)
class EventForecast:
    """Weather and outfit advice for one event."""

    event: CalendarEvent
    weather: str
    recommendation: str
    emoji: str
