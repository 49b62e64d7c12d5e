#!/usr/bin/env python3
"""
Logging configuration for oaschema.

Library modules only create module-level loggers; handlers are attached here,
and only when an entry point (the CLI, an embedding tool) asks for it.
"""

import logging
import sys
from typing import Final, TextIO

LOGGER_NAME: Final[str] = "oaschema"
LOG_FORMAT: Final[str] = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"

_VALID_LEVELS: Final[tuple[str, ...]] = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def parse_level(level: str | int) -> int:
    """
    Convert a level name (case-insensitive) or number to a logging level.

    Raises:
        ValueError: for unknown level names.
    """
    if isinstance(level, int):
        return level
    name = str(level).strip().upper()
    if name not in _VALID_LEVELS:
        raise ValueError(f"Unknown log level {level!r}; expected one of {list(_VALID_LEVELS)}")
    return getattr(logging, name)


def configure_logging(level: str | int = "WARNING", stream: TextIO | None = None) -> logging.Logger:
    """
    Attach a single stream handler to the package logger and set its level.

    Calling this again replaces the handler rather than stacking another one.
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(parse_level(level))

    for handler in list(logger.handlers):
        if getattr(handler, "_oaschema_handler", False):
            logger.removeHandler(handler)

    handler = logging.StreamHandler(stream or sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    handler._oaschema_handler = True  # type: ignore[attr-defined]
    logger.addHandler(handler)
    return logger
