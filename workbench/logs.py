"""Process-wide loguru configuration.

Loguru has no single mutable level, so the active level is applied by
replacing the stderr sink. The level last applied is kept here so callers
(and tests) can observe it.
"""

from __future__ import annotations

import sys

from loguru import logger

from .models import Level

__all__ = ["configure_logging", "set_level", "current_level", "LOGURU_LEVELS"]

LOGURU_LEVELS = {
    Level.TRACE: "TRACE",
    Level.DEBUG: "DEBUG",
    Level.INFO: "INFO",
    Level.WARN: "WARNING",
    Level.ERROR: "ERROR",
}

_FORMAT = "<green>{time:YYYY-MM-DD HH:mm:ss.SSS}</green> <level>{level: <8}</level> <level>{message}</level>"

_active_level: Level | None = None
_sink_id: int | None = None


def configure_logging(level: Level = Level.INFO) -> None:
    """Drop every existing sink and log to stderr at ``level``."""
    global _sink_id
    logger.remove()
    _sink_id = None
    set_level(level)


def set_level(level: Level | str) -> None:
    """Make ``level`` the active level of the stderr sink."""
    global _active_level, _sink_id
    level = Level(level)
    try:
        # 0 is loguru's default stderr handler.
        logger.remove(_sink_id if _sink_id is not None else 0)
    except ValueError:
        pass
    verbose = level is Level.TRACE
    _sink_id = logger.add(
        sys.stderr,
        level=LOGURU_LEVELS[level],
        format=_FORMAT,
        backtrace=verbose,
        diagnose=verbose,
    )
    _active_level = level


def current_level() -> Level | None:
    return _active_level
