"""Port definitions for correlog.

Infrastructure adapters implement these protocols; application services
depend only on them.
"""

from correlog.application.ports.build_identity import (
    UNKNOWN_VERSION,
    BuildIdentityProviderProtocol,
)
from correlog.application.ports.event_sink import EventSinkProtocol
from correlog.application.ports.event_writer import EventWriterProtocol
from correlog.application.ports.sink_registry import SinkRegistryProtocol

__all__: list[str] = [
    "UNKNOWN_VERSION",
    "BuildIdentityProviderProtocol",
    "EventSinkProtocol",
    "EventWriterProtocol",
    "SinkRegistryProtocol",
]
