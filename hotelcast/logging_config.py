"""Logging helpers for hotelcast.

The library is silent by default (NullHandler on the package logger).
Scripts and the dashboard opt in:

    from hotelcast.logging_config import enable_console_logging
    enable_console_logging(level="DEBUG")

Environment variables read by configure_from_env():
    HOTELCAST_LOGGING: log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    HOTELCAST_LOG_FILE: path to a rotating log file
"""

from __future__ import annotations

import logging
import os
from logging.handlers import RotatingFileHandler
from pathlib import Path

DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DEFAULT_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
DEFAULT_MAX_BYTES = 10 * 1024 * 1024
DEFAULT_BACKUP_COUNT = 5

LOGGER_NAME = "hotelcast"


def _get_level(level: str | int) -> int:
    if isinstance(level, int):
        return level
    return getattr(logging, level.upper(), logging.INFO)


def _get_logger() -> logging.Logger:
    return logging.getLogger(LOGGER_NAME)


def enable_console_logging(level: str | int = "INFO", format: str = DEFAULT_FORMAT) -> logging.StreamHandler:
    """Attach a stderr handler to the hotelcast logger and return it."""
    logger = _get_logger()
    logger.setLevel(_get_level(level))

    handler = logging.StreamHandler()
    handler.setLevel(_get_level(level))
    handler.setFormatter(logging.Formatter(format, DEFAULT_DATE_FORMAT))
    logger.addHandler(handler)
    return handler


def enable_file_logging(
    path: str | Path,
    level: str | int = "INFO",
    max_bytes: int = DEFAULT_MAX_BYTES,
    backup_count: int = DEFAULT_BACKUP_COUNT,
) -> RotatingFileHandler:
    """Attach a size-rotated file handler; parent directories are created."""
    logger = _get_logger()
    logger.setLevel(_get_level(level))

    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    handler = RotatingFileHandler(path, maxBytes=max_bytes, backupCount=backup_count)
    handler.setLevel(_get_level(level))
    handler.setFormatter(logging.Formatter(DEFAULT_FORMAT, DEFAULT_DATE_FORMAT))
    logger.addHandler(handler)
    return handler


def disable_logging() -> None:
    """Remove every handler except the NullHandler."""
    logger = _get_logger()
    for handler in logger.handlers[:]:
        if not isinstance(handler, logging.NullHandler):
            logger.removeHandler(handler)
            handler.close()


def configure_from_env() -> bool:
    """Enable logging according to HOTELCAST_LOGGING / HOTELCAST_LOG_FILE.

    Returns True when the environment requested logging.
    """
    level = os.environ.get("HOTELCAST_LOGGING")
    if not level:
        return False
    enable_console_logging(level=level)
    log_file = os.environ.get("HOTELCAST_LOG_FILE")
    if log_file:
        enable_file_logging(log_file, level=level)
    return True
