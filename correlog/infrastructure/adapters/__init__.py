"""Infrastructure adapters implementing correlog ports."""

from correlog.infrastructure.adapters.build_identity import PackageBuildIdentityProvider
from correlog.infrastructure.adapters.sink_registry import (
    InMemorySinkRegistry,
    default_writers,
)
from correlog.infrastructure.adapters.stream_writer import StreamEventWriter
from correlog.infrastructure.adapters.structlog_writer import StructlogEventWriter
from correlog.infrastructure.adapters.trace_source import TraceSource

__all__: list[str] = [
    "InMemorySinkRegistry",
    "PackageBuildIdentityProvider",
    "StreamEventWriter",
    "StructlogEventWriter",
    "TraceSource",
    "default_writers",
]
