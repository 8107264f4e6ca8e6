"""Logging configuration (structlog)."""

from __future__ import annotations

import logging
import sys
from typing import Any

import structlog

from emitkit.config.settings import get_settings
from emitkit.domain.exceptions import ConfigurationError


def configure_logging(level: str | None = None, json: bool | None = None) -> None:
    """Configure structlog processors and the minimum level.

    Falls back to ``log_level`` / ``log_json`` from settings when the
    arguments are omitted.
    """
    settings = get_settings()
    level_name = (level or settings.log_level).upper()
    numeric_level = logging.getLevelName(level_name)
    if not isinstance(numeric_level, int):
        raise ConfigurationError(
            f"Unknown log level: {level_name}",
            details={"log_level": level_name},
        )
    use_json = settings.log_json if json is None else json

    renderer = (
        structlog.processors.JSONRenderer()
        if use_json
        else structlog.dev.ConsoleRenderer(colors=False)
    )
    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(numeric_level),
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        cache_logger_on_first_use=False,
    )


def get_logger(name: str | None = None) -> Any:
    """Return a structlog logger bound to *name*."""
    return structlog.get_logger(name)
