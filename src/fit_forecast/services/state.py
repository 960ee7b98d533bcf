"""Observable holder for the current weather text."""

from collections.abc import Callable
from dataclasses import dataclass, field

INITIAL_WEATHER_TEXT = "Fetching weather..."

Subscriber = Callable[[str], None]


@dataclass
class WeatherState:
    """Latest weather text shown to the user.

    Subscribers are called synchronously in the context that publishes the
    update. Whatever renders the value is responsible for hopping onto its
    own loop or thread.
    """

    current_weather: str = INITIAL_WEATHER_TEXT
    _subscribers: list[Subscriber] = field(default_factory=list, repr=False)

    def subscribe(self, callback: Subscriber) -> Callable[[], None]:
        """Register a callback and return a function that removes it."""
        self._subscribers.append(callback)

        def unsubscribe() -> None:
            if callback in self._subscribers:
                self._subscribers.remove(callback)

        return unsubscribe

    def publish(self, text: str) -> None:
        """Replace the current text and notify subscribers."""
        self.current_weather = text
        for callback in list(self._subscribers):
            callback(text)
