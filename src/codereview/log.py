"""Structured logging setup.

Log events go to stderr so that JSON report output on stdout stays parseable.
"""

from __future__ import annotations

import logging
import sys
from typing import Any

import structlog


def configure_logging(level: str = "WARNING", json_output: bool = False) -> None:
    """Configure structlog for the process.

    Args:
        level: Minimum level name to emit (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        json_output: Render events as JSON lines instead of console text
    """
    numeric_level = logging.getLevelNamesMapping().get(level.upper(), logging.WARNING)

    processors: list[Any] = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
    ]
    if json_output:
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=False))

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(numeric_level),
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        cache_logger_on_first_use=False,
    )


def get_logger(name: str, **initial_values: Any) -> Any:
    """Return a structlog logger bound to a component name.

    Applies the default configuration (WARNING, console, stderr) if nothing has
    configured structlog yet.
    """
    if not structlog.is_configured():
        configure_logging()
    return structlog.get_logger(name, **initial_values)
