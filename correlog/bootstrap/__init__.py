"""Composition root for wiring dependencies.

This package centralizes infrastructure-aware wiring so callers get ready
Logger instances without importing adapters directly.
"""

from correlog.bootstrap.logging import (
    configure,
    get_caller_logger,
    get_logger,
    get_logger_for_type,
    get_sink_registry,
    reset_logging,
    set_sink_registry,
)

__all__ = [
    "configure",
    "get_caller_logger",
    "get_logger",
    "get_logger_for_type",
    "get_sink_registry",
    "reset_logging",
    "set_sink_registry",
]
