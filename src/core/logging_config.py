"""Structured logging configuration.

This module initializes structlog with a stable JSON event format.
Events go to stderr so stdout stays free for command output.
"""

from __future__ import annotations

import logging
import sys
from typing import Any

import structlog

from core.constants import DEFAULT_LOG_LEVEL, SUPPORTED_LOG_LEVELS


def configure_logging(level: str = DEFAULT_LOG_LEVEL) -> None:
    """Configure structlog processors and minimum level.

    Args:
        level: Level name, one of ``SUPPORTED_LOG_LEVELS``.
    """
    level_name = level.upper()
    if level_name not in SUPPORTED_LOG_LEVELS:
        level_name = DEFAULT_LOG_LEVEL
    structlog.configure(
        processors=[
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.add_log_level,
            structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(
            logging.getLevelName(level_name)
        ),
        logger_factory=_stderr_logger_factory,
        cache_logger_on_first_use=False,
    )


def get_logger(name: str) -> Any:
    """Return a module logger instance.

    Args:
        name: Logger name, usually __name__.

    Returns:
        A structlog logger with structured output.
    """
    if not structlog.is_configured():
        configure_logging()
    return structlog.get_logger(name)


def _stderr_logger_factory(*args: Any) -> structlog.PrintLogger:
    """Create a print logger bound to the current stderr stream."""
    return structlog.PrintLogger(file=sys.stderr)
