"""Logging setup shared by the desktop app and the headless runner."""

from __future__ import annotations

import logging
import sys
from typing import Optional, Union


PACKAGE_LOGGER = "connected_spring"
LOG_FORMAT = "%(asctime)s %(levelname)-7s %(name)s: %(message)s"


def resolve_level(level: Union[int, str]) -> int:
    """Accept ``logging.DEBUG`` or a case-insensitive name such as ``"debug"``."""
    if isinstance(level, int):
        return level
    value = logging.getLevelName(str(level).strip().upper())
    if not isinstance(value, int):
        raise ValueError(f"unknown log level: {level!r}")
    return value


def setup_logging(level: Union[int, str] = logging.INFO, log_file: Optional[str] = None) -> logging.Logger:
    """Configure the package logger and return it.

    Records go to stderr so the headless report on stdout stays parseable.
    Calling this again replaces the previous handlers.
    """
    resolved = resolve_level(level)
    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(resolved)

    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    formatter = logging.Formatter(LOG_FORMAT, datefmt="%H:%M:%S")

    console = logging.StreamHandler(sys.stderr)
    console.setFormatter(formatter)
    logger.addHandler(console)

    if log_file:
        file_handler = logging.FileHandler(log_file, mode="w", encoding="utf-8")
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    logger.debug("logging at %s", logging.getLevelName(resolved))
    return logger
