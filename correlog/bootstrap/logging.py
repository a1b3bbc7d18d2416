"""Bootstrap wiring for loggers, the sink registry and structlog."""

from __future__ import annotations

import inspect
import threading

from correlog.application.services.logger import Logger
from correlog.config.logging_config import LoggingConfig
from correlog.domain.errors.argument import InvalidArgumentError
from correlog.infrastructure.adapters.build_identity import PackageBuildIdentityProvider
from correlog.infrastructure.adapters.sink_registry import InMemorySinkRegistry
from correlog.infrastructure.observability import configure_structlog

_registry: InMemorySinkRegistry | None = None
_registry_lock = threading.Lock()


def configure(config: LoggingConfig | None = None) -> LoggingConfig:
    """Configure structlog and the process-wide registry.

    Existing sources are re-leveled to the new config.

    Args:
        config: Config to apply; defaults to LoggingConfig.from_environment().

    Returns:
        The applied config.
    """
    config = config or LoggingConfig.from_environment()
    configure_structlog(environment=config.environment)
    registry = get_sink_registry()
    registry.reconfigure(config)
    return config


def get_sink_registry() -> InMemorySinkRegistry:
    """Get the process-wide sink registry, creating it from the environment."""
    global _registry
    if _registry is None:
        with _registry_lock:
            if _registry is None:
                _registry = InMemorySinkRegistry(LoggingConfig.from_environment())
    return _registry


def set_sink_registry(registry: InMemorySinkRegistry) -> None:
    """Set custom registry (testing/override)."""
    global _registry
    with _registry_lock:
        _registry = registry


def reset_logging() -> None:
    """Reset the registry singleton (testing cleanup)."""
    global _registry
    with _registry_lock:
        _registry = None


def get_logger(name: str) -> Logger:
    """Logger for a named source.

    Loggers for the same name share one source.

    Raises:
        InvalidArgumentError: If name is None or empty.
    """
    source = get_sink_registry().get_or_create(name)
    return Logger(source, build_identity=PackageBuildIdentityProvider(name))


def get_logger_for_type(cls: type) -> Logger:
    """Logger whose source is named after the top-level package defining cls."""
    return get_logger(_top_level_package(cls.__module__))


def get_caller_logger() -> Logger:
    """Logger whose source is named after the caller's top-level package."""
    frame = inspect.currentframe()
    caller = frame.f_back if frame is not None else None
    try:
        module_name = caller.f_globals.get("__name__", "") if caller else ""
    finally:
        del frame, caller
    if not module_name:
        raise InvalidArgumentError("name", "cannot determine the calling module")
    return get_logger(_top_level_package(module_name))


def _top_level_package(module_name: str) -> str:
    return module_name.partition(".")[0]
