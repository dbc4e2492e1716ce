"""Logging setup and messages forwarded from the interface."""

from __future__ import annotations

import logging
import time

TRACE = 5
logging.addLevelName(TRACE, "TRACE")

APP_LOGGER = "pictures_manager"

_FRONT_LEVELS = {1: logging.ERROR, 2: logging.WARNING, 4: logging.DEBUG, 5: TRACE}


def log_from_front(message: str, level: int) -> None:
    """Log ``message`` at a numeric level: 1 error, 2 warn, 4 debug, 5 trace, else info."""
    logging.getLogger(APP_LOGGER).log(_FRONT_LEVELS.get(level, logging.INFO), "%s", message)


def format_record(record: logging.LogRecord) -> str:
    """``[HH:MM:SS][target] LEVEL message`` with the time in UTC."""
    stamp = time.strftime("%H:%M:%S", time.gmtime(record.created))
    target = record.name.replace(APP_LOGGER, "", 1)
    return f"[{stamp}][{target}] {record.levelname} {record.getMessage()}"


class _Formatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        return format_record(record)


def configure_logging() -> logging.Handler:
    """Send records to standard error: debug and up, trace for this package."""
    handler = logging.StreamHandler()
    handler.setFormatter(_Formatter())
    root = logging.getLogger()
    root.addHandler(handler)
    root.setLevel(logging.DEBUG)
    logging.getLogger(APP_LOGGER).setLevel(TRACE)
    return handler