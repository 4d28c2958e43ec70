"""Structured logging configuration.

Features:
- Human-readable console output by default
- JSON-formatted output for CI log collection
- Tool context on every entry

Logs go to stderr; stdout is reserved for the test report.
"""

import logging
import sys
from typing import Any

import structlog
from structlog.types import Processor

from regress.core.config import Settings, get_settings
from regress.core.constants import VERSION


def add_tool_context(
    logger: logging.Logger,
    method_name: str,
    event_dict: dict[str, Any],
) -> dict[str, Any]:
    """Add tool context to all log entries.

    Args:
        logger: The wrapped logger object.
        method_name: The name of the method called on the logger.
        event_dict: The event dictionary to process.

    Returns:
        Updated event dictionary with tool context.
    """
    event_dict["tool"] = "regress"
    event_dict["version"] = VERSION
    return event_dict


def stderr_logger_factory(*args: Any) -> structlog.PrintLogger:
    """Print to whatever sys.stderr is at the time of the call."""
    return structlog.PrintLogger(file=sys.stderr)


def configure_logging(settings: Settings | None = None) -> None:
    """Configure structured logging for the harness.

    Args:
        settings: Harness settings. Uses get_settings() if not provided.
    """
    settings = settings or get_settings()
    level = logging.getLevelName(settings.log_level.upper())

    shared_processors: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]

    if settings.log_format == "json":
        processors: list[Processor] = [
            *shared_processors,
            add_tool_context,
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ]
    else:
        processors = [
            *shared_processors,
            structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty()),
        ]

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(level),
        context_class=dict,
        logger_factory=stderr_logger_factory,
        cache_logger_on_first_use=False,
    )

    logging.basicConfig(
        format="%(message)s",
        stream=sys.stderr,
        level=level,
    )

    # Reduce noise from third-party libraries
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)


def get_logger(name: str | None = None) -> structlog.BoundLogger:
    """Get a structured logger instance.

    Args:
        name: Optional logger name (module name recommended).

    Returns:
        Configured structlog BoundLogger instance.

    Example:
        ```python
        from regress.core.logging import get_logger

        logger = get_logger(__name__)
        logger.info("Downloading test file", url=url, sha1=sha1)
        ```
    """
    return structlog.get_logger(name)


Logger = structlog.BoundLogger
