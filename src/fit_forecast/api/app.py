"""FastAPI application factory."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from uuid import UUID

from fastapi import FastAPI, HTTPException, Request, Response, status
from fastapi.responses import JSONResponse

from fit_forecast.api.models import (
    CurrentWeatherOut,
    EventForecastOut,
    EventForecastRequest,
    EventForecastResponse,
    HourlyWeatherOut,
    HourOut,
    OutfitIn,
    OutfitOut,
    PreferencesBody,
    RecommendationOut,
    SettingsOut,
    SettingsUpdate,
)
from fit_forecast.app_logging import configure_logging
from fit_forecast.containers import AppContainer
from fit_forecast.domain.errors import (
    DecodeFailure,
    FitForecastError,
    InvalidInput,
    NetworkFailure,
    PersistenceFailure,
)
from fit_forecast.services.matching import match_events
from fit_forecast.services.recommendations import recommend

_ERROR_STATUS: tuple[tuple[type[FitForecastError], int], ...] = (
    (InvalidInput, status.HTTP_400_BAD_REQUEST),
    (NetworkFailure, status.HTTP_502_BAD_GATEWAY),
    (DecodeFailure, status.HTTP_502_BAD_GATEWAY),
    (PersistenceFailure, status.HTTP_503_SERVICE_UNAVAILABLE),
)


def create_app(container: AppContainer) -> FastAPI:  # noqa: PLR0915
    """Create a FastAPI app configured with dependencies."""
    configure_logging(container.settings.log_level)
    logger = logging.getLogger(__name__)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        yield
        await app.state.container.close_resources()

    app = FastAPI(lifespan=lifespan)
    app.state.container = container

    @app.exception_handler(FitForecastError)
    async def handle_domain_error(
        request: Request, exc: FitForecastError
    ) -> JSONResponse:
        status_code = _status_for(exc)
        if isinstance(exc, PersistenceFailure):
            logger.error(
                "Persistence failure on %s", request.url.path, exc_info=exc
            )
        else:
            logger.warning("%s on %s: %s", type(exc).__name__, request.url.path, exc)
        return JSONResponse(status_code=status_code, content={"detail": exc.user_message})

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    @app.get("/weather/current")
    async def current_weather(city: str, request: Request) -> CurrentWeatherOut:
        """Return current conditions and remember the city."""
        state_container: AppContainer = request.app.state.container
        reading = await state_container.weather_service.fetch_current(city)
        state_container.app_settings_service.set_last_used_city(city)
        return CurrentWeatherOut.from_reading(city, reading)

    @app.get("/weather/summary")
    async def weather_summary(city: str, request: Request) -> dict[str, str]:
        """Return the display text for a city's weather, errors included."""
        state_container: AppContainer = request.app.state.container
        text = await state_container.weather_service.describe_current(city)
        return {"city": city, "weather": text}

    @app.get("/weather/hourly")
    async def hourly_weather(city: str, request: Request) -> HourlyWeatherOut:
        """Return today's hourly forecast sorted by time."""
        state_container: AppContainer = request.app.state.container
        hourly = await state_container.weather_service.fetch_hourly(city)
        hours = [
            HourOut(time=time, weather=reading.display)
            for time, reading in sorted(hourly.items())
        ]
        return HourlyWeatherOut(city=city, hours=hours)

    @app.get("/recommendations")
    async def city_recommendation(city: str, request: Request) -> RecommendationOut:
        """Fetch the weather for a city and recommend an outfit."""
        state_container: AppContainer = request.app.state.container
        reading = await state_container.weather_service.fetch_current(city)
        return RecommendationOut.from_domain(recommend(reading.display))

    @app.get("/recommendations/preview")
    async def preview_recommendation(weather: str) -> RecommendationOut:
        """Recommend an outfit for a weather string without any lookup."""
        return RecommendationOut.from_domain(recommend(weather))

    @app.post("/events/forecast")
    async def events_forecast(
        body: EventForecastRequest, request: Request
    ) -> EventForecastResponse:
        """Match events to the city's hourly forecast."""
        state_container: AppContainer = request.app.state.container
        hourly = await state_container.weather_service.fetch_hourly(body.city)
        forecasts = match_events([event.to_domain() for event in body.events], hourly)
        return EventForecastResponse(
            city=body.city,
            forecasts=[EventForecastOut.from_domain(item) for item in forecasts],
        )

    @app.get("/outfits")
    async def list_outfits(request: Request) -> list[OutfitOut]:
        """Return saved outfits."""
        state_container: AppContainer = request.app.state.container
        outfits = state_container.outfit_store.list()
        return [OutfitOut.from_domain(item) for item in outfits]

    @app.post("/outfits", status_code=status.HTTP_201_CREATED)
    async def save_outfit(body: OutfitIn, request: Request) -> OutfitOut:
        """Save an outfit, asking for confirmation when it looks duplicated."""
        state_container: AppContainer = request.app.state.container
        outfit = body.to_domain()
        store = state_container.outfit_store
        if not body.allow_duplicate and store.is_duplicate(outfit):
            raise HTTPException(
                status_code=status.HTTP_409_CONFLICT,
                detail="An outfit with this name is already saved for this location.",
            )
        store.save(outfit)
        return OutfitOut.from_domain(outfit)

    @app.delete("/outfits/{outfit_id}", status_code=status.HTTP_204_NO_CONTENT)
    async def delete_outfit(outfit_id: UUID, request: Request) -> Response:
        """Delete a saved outfit; unknown ids succeed."""
        state_container: AppContainer = request.app.state.container
        state_container.outfit_store.remove(outfit_id)
        return Response(status_code=status.HTTP_204_NO_CONTENT)

    @app.get("/preferences")
    async def get_preferences(request: Request) -> PreferencesBody:
        """Return the user's preferences."""
        state_container: AppContainer = request.app.state.container
        return PreferencesBody.from_domain(state_container.preferences_store.load())

    @app.put("/preferences")
    async def put_preferences(body: PreferencesBody, request: Request) -> PreferencesBody:
        """Replace the user's preferences."""
        state_container: AppContainer = request.app.state.container
        preferences = body.to_domain()
        state_container.preferences_store.save(preferences)
        return PreferencesBody.from_domain(preferences)

    @app.get("/settings")
    async def get_settings(request: Request) -> SettingsOut:
        """Return app settings."""
        state_container: AppContainer = request.app.state.container
        return SettingsOut.from_domain(state_container.app_settings_service.get())

    @app.put("/settings")
    async def put_settings(body: SettingsUpdate, request: Request) -> SettingsOut:
        """Update any provided app settings."""
        service = request.app.state.container.app_settings_service
        if body.dark_mode is not None:
            service.set_dark_mode(body.dark_mode)
        if body.notifications_enabled is not None:
            service.set_notifications_enabled(body.notifications_enabled)
        if body.last_used_city is not None:
            service.set_last_used_city(body.last_used_city)
        return SettingsOut.from_domain(service.get())

    return app


def _status_for(exc: FitForecastError) -> int:
    for error_type, status_code in _ERROR_STATUS:
        if isinstance(exc, error_type):
            return status_code
    return status.HTTP_500_INTERNAL_SERVER_ERROR
