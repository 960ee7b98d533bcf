"""Error taxonomy shared by adapters, services and the API layer."""


class FitForecastError(Exception):
    """Base error carrying a message safe to show to the user."""

    default_message = "Something went wrong"

    def __init__(self, user_message: str | None = None) -> None:
        self.user_message = user_message or self.default_message
        super().__init__(self.user_message)


class InvalidInput(FitForecastError):
    """Raised for a city name that cannot be queried."""

    default_message = "Invalid city name"


class NetworkFailure(FitForecastError):
    """Raised when the weather API cannot be reached."""

    def __init__(self, cause: str) -> None:
        self.cause = cause
        super().__init__(f"Error: {cause}")


class DecodeFailure(FitForecastError):
    """Raised when a weather response has an unexpected shape."""

    default_message = "Failed to decode weather"


class PersistenceFailure(FitForecastError):
    """Raised when the local store cannot be read or written."""

    default_message = "Could not access saved data"
