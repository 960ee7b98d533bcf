"""Tests for logging configuration."""

import logging

from fastapi.testclient import TestClient

from fit_forecast.api.app import create_app
from fit_forecast.app_logging import configure_logging


def test_configure_logging_idempotent() -> None:
    logger = logging.getLogger("fit_forecast")
    logger.handlers.clear()

    configure_logging()
    first_count = len(logger.handlers)

    configure_logging()
    second_count = len(logger.handlers)

    assert first_count == 1
    assert second_count == 1


def test_configure_logging_applies_level() -> None:
    logger = logging.getLogger("fit_forecast")

    configure_logging("debug")
    assert logger.level == logging.DEBUG

    configure_logging("WARNING")
    assert logger.level == logging.WARNING
    assert len(logger.handlers) == 1
    assert logging.getLogger("httpx").level == logging.WARNING

    configure_logging()


def test_create_app_uses_configured_level(container) -> None:
    container.settings.log_level = "ERROR"

    TestClient(create_app(container))

    assert logging.getLogger("fit_forecast").level == logging.ERROR
    configure_logging()
