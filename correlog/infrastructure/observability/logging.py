"""Structured logging configuration with structlog.

Centralized structlog configuration supporting production (JSON) and
development (console) output.

Log Entry Format (production):
    {
        "timestamp": "2024-01-01T00:00:00.000000Z",
        "level": "info",
        "event": "message",
        "activity_id": "uuid",
        "logical_operation_stack": ["Outer", "Inner"],
        "source": "billing",
        ...additional context
    }

Usage:
    from correlog.infrastructure.observability import configure_structlog

    configure_structlog(environment="production")  # JSON output
    configure_structlog(environment="development")  # Console output
"""

import logging
import os
from typing import cast

import structlog
from structlog.typing import Processor

from correlog.infrastructure.observability.correlation import (
    activity_id_processor,
    logical_operation_processor,
)

# Environment variable for structlog's own filter level (default: DEBUG).
# Source thresholds do the real filtering; this is a second gate.
LOG_LEVEL_ENV = "LOG_LEVEL"
DEFAULT_LOG_LEVEL = "DEBUG"


def _get_log_level() -> int:
    """Get the configured log level from environment.

    Returns:
        The logging level integer (e.g., logging.INFO).
    """
    level_name = os.getenv(LOG_LEVEL_ENV, DEFAULT_LOG_LEVEL).upper()
    return getattr(logging, level_name, logging.DEBUG)


def configure_structlog(
    environment: str = "production", level: int | None = None
) -> None:
    """Configure structlog for the process.

    Should be called once at startup; bootstrap.configure() calls it.

    Args:
        environment: 'production' for JSON output, 'development' for console.
                    Defaults to 'production'.
        level: stdlib logging level to filter at. Defaults to the LOG_LEVEL
               environment variable, else DEBUG.
    """
    shared_processors: list[Processor] = [
        # Merge context from contextvars (async support)
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        cast(Processor, activity_id_processor),
        cast(Processor, logical_operation_processor),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]

    if environment == "production":
        final_processor: Processor = structlog.processors.JSONRenderer()
    else:
        final_processor = structlog.dev.ConsoleRenderer(colors=True)

    processors = shared_processors + [final_processor]

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(
            _get_log_level() if level is None else level
        ),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=False,
    )


def get_logger_for_component(
    source_name: str, component: str = "correlog"
) -> structlog.typing.FilteringBoundLogger:
    """Get a structlog logger pre-bound with a source name.

    Args:
        source_name: Logical source name (typically a package name).
        component: Component label for log categorization.

    Returns:
        A bound logger with source and component bound.
    """
    return structlog.get_logger().bind(
        source=source_name,
        component=component,
    )
