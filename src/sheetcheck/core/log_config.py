"""Logging setup for applications embedding sheetcheck."""

from __future__ import annotations

import logging

from sheetcheck.core.config import AppSettings

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def configure_logging(settings: AppSettings | None = None) -> logging.Logger:
    """Attach a stream handler to the ``sheetcheck`` logger at the configured level.

    Safe to call more than once; a handler is only added the first time.
    """
    if settings is None:
        settings = AppSettings()

    logger = logging.getLogger("sheetcheck")
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)
    logger.setLevel(settings.log_level.upper())
    return logger
