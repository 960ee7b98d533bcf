"""ASGI entrypoint: ``uvicorn fit_forecast.api.asgi:app``."""

import logging

from fit_forecast.api.app import create_app
from fit_forecast.app_logging import configure_logging
from fit_forecast.config import Settings
from fit_forecast.containers import build_container

settings = Settings()
configure_logging(settings.log_level)
logging.getLogger(__name__).info(
    "Starting FitForecast (%s, %s storage)",
    settings.environment,
    settings.storage_backend,
)
app = create_app(build_container(settings))
