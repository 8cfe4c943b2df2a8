"""Structured logging configuration.

This module initializes structlog loggers with a stable JSON format
so unattended monthly runs leave machine-readable event lines on stderr.
"""

from __future__ import annotations

import sys
from typing import Any

import structlog


def get_logger(name: str) -> Any:
    """Return a module logger instance.

    Args:
        name: Logger name, usually __name__.

    Returns:
        A structlog logger with structured output.
    """
    structlog.configure(
        processors=[
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.add_log_level,
            structlog.processors.JSONRenderer(),
        ],
        logger_factory=_stderr_logger_factory,
        cache_logger_on_first_use=False,
    )
    return structlog.get_logger(name)


def _stderr_logger_factory(*_args: Any) -> structlog.PrintLogger:
    """Create a print logger bound to the current stderr stream.

    Stdout is reserved for command output, and the stream is looked up
    on every call so redirected streams are honoured.
    """
    return structlog.PrintLogger(file=sys.stderr)
