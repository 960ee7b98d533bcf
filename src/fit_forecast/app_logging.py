"""Logging setup for the FitForecast service."""

import logging

_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"
_QUIET_LOGGERS = ("httpx", "httpcore")


def configure_logging(level: str = "INFO") -> None:
    """Route ``fit_forecast`` logs to one stream handler at ``level``.

    Calling it again only changes the level. Per-request logs from the HTTP
    client libraries are limited to warnings.
    """
    logger = logging.getLogger("fit_forecast")
    logger.setLevel(level.upper())
    for name in _QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)
    if logger.handlers:
        return
    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(_FORMAT))
    logger.addHandler(handler)
    logger.propagate = False
