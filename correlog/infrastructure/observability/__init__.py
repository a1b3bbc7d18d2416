"""Observability infrastructure for structured logging and activity correlation.

This module provides:
- Structured logging with structlog
- Processors that stamp the current activity identity and operation stack
  onto every structlog entry

Usage:
    from correlog.infrastructure.observability import configure_structlog

    # At startup
    configure_structlog(environment="production")

    # Anywhere
    structlog.get_logger().info("event")  # carries activity_id when in scope
"""

from correlog.infrastructure.observability.correlation import (
    activity_id_processor,
    logical_operation_processor,
)
from correlog.infrastructure.observability.logging import (
    configure_structlog,
    get_logger_for_component,
)

__all__: list[str] = [
    "activity_id_processor",
    "configure_structlog",
    "get_logger_for_component",
    "logical_operation_processor",
]
