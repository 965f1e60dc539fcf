"""Logging configuration for the chat bot and the CLI."""

from __future__ import annotations

import logging
import os

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"

# Third-party loggers that are chatty at INFO.
_NOISY_LOGGERS: tuple[str, ...] = ("aiogram.event", "aiogram.dispatcher")


def configure_logging(level: str | None = None) -> None:
    """Configure Python logging for the process.

    Level precedence: explicit argument, then `LOG_LEVEL`, then INFO. Logs are for internal
    diagnostics and are never echoed back to the chat user.
    """

    log_level = (level or os.getenv("LOG_LEVEL") or "INFO").upper()
    logging.basicConfig(level=log_level, format=LOG_FORMAT)

    for name in _NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)
