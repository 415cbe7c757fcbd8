"""Structured logging setup.

Loggers are structlog loggers writing key/value events to stderr, so that
stdout stays reserved for command output.
"""

from __future__ import annotations

import logging
import sys

import structlog

from wikimark.core.exceptions import ConfigurationError


def _resolve_level(level: str | int) -> int:
    if isinstance(level, int):
        return level
    resolved = logging.getLevelName(level.upper())
    if not isinstance(resolved, int):
        raise ConfigurationError(
            f"Unknown log level: {level!r}",
            details={"level": level},
        )
    return resolved


def configure_logging(level: str | int = "WARNING", fmt: str = "console") -> None:
    """Configure structlog for the process.

    Args:
        level: Minimum level name (``"DEBUG"``, ``"INFO"``, ...) or number.
        fmt: ``"console"`` for human-readable lines, ``"json"`` for one JSON
            object per event.

    Raises:
        ConfigurationError: If *level* or *fmt* is not recognised.
    """
    numeric = _resolve_level(level)

    if fmt == "json":
        renderer = structlog.processors.JSONRenderer()
    elif fmt == "console":
        renderer = structlog.dev.ConsoleRenderer(colors=False)
    else:
        raise ConfigurationError(
            f"Unknown log format: {fmt!r}",
            details={"format": fmt},
        )

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(numeric),
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        cache_logger_on_first_use=False,
    )


def get_logger(name: str | None = None) -> structlog.typing.FilteringBoundLogger:
    """Return a structlog logger bound to *name*."""
    return structlog.get_logger(name)
