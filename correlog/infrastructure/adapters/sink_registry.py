"""In-memory named sink registry.

One TraceSource per logical source name, created lazily on first lookup
and shared by every later lookup of the same name.
"""

from __future__ import annotations

import threading
from collections.abc import Callable

import structlog

from correlog.application.ports.event_writer import EventWriterProtocol
from correlog.application.ports.sink_registry import SinkRegistryProtocol
from correlog.config.logging_config import DEFAULT_LOGGING_CONFIG, LoggingConfig
from correlog.domain.errors.argument import InvalidArgumentError
from correlog.infrastructure.adapters.stream_writer import StreamEventWriter
from correlog.infrastructure.adapters.structlog_writer import StructlogEventWriter
from correlog.infrastructure.adapters.trace_source import TraceSource
from correlog.infrastructure.monitoring.metrics_event_writer import MetricsEventWriter

logger = structlog.get_logger(__name__)

WriterFactory = Callable[[str, LoggingConfig], list[EventWriterProtocol]]


def default_writers(source_name: str, config: LoggingConfig) -> list[EventWriterProtocol]:
    """Writers attached to a newly created source.

    A structlog writer always. A stderr text writer, truncating at the
    configured message size, when streaming is enabled. The Prometheus
    writer when metrics are enabled.
    """
    writers: list[EventWriterProtocol] = [StructlogEventWriter(source_name)]
    if config.stream_enabled:
        writers.append(StreamEventWriter(max_message_size=config.max_message_size))
    if config.metrics_enabled:
        writers.append(MetricsEventWriter())
    return writers


class InMemorySinkRegistry(SinkRegistryProtocol):
    """Lock-guarded keyed store of TraceSource instances.

    Usage:
        registry = InMemorySinkRegistry(LoggingConfig.from_environment())
        source = registry.get_or_create("billing")
        assert registry.get_or_create("billing") is source
    """

    def __init__(
        self,
        config: LoggingConfig = DEFAULT_LOGGING_CONFIG,
        writer_factory: WriterFactory = default_writers,
    ) -> None:
        """Initialize the registry.

        Args:
            config: Supplies the level for each new source.
            writer_factory: Builds the writers of each new source.
        """
        self._config = config
        self._writer_factory = writer_factory
        self._sources: dict[str, TraceSource] = {}
        self._lock = threading.Lock()

    @property
    def config(self) -> LoggingConfig:
        return self._config

    def get_or_create(self, name: str) -> TraceSource:
        if not name:
            raise InvalidArgumentError("name")
        with self._lock:
            source = self._sources.get(name)
            if source is None:
                source = TraceSource(
                    name,
                    level=self._config.level_for(name),
                    writers=self._writer_factory(name, self._config),
                )
                self._sources[name] = source
                logger.debug(
                    "trace_source_created",
                    source_name=name,
                    level=source.level.name,
                )
        return source

    def names(self) -> list[str]:
        with self._lock:
            return sorted(self._sources)

    def reconfigure(self, config: LoggingConfig) -> None:
        """Adopt a new config and re-level every existing source.

        Writers of existing sources are left as they are.
        """
        with self._lock:
            self._config = config
            for name, source in self._sources.items():
                source.level = config.level_for(name)

    def clear(self) -> None:
        """Forget every source (testing cleanup)."""
        with self._lock:
            self._sources.clear()
