"""Stub implementations of correlog ports for testing."""

from correlog.infrastructure.stubs.build_identity_stub import BuildIdentityProviderStub
from correlog.infrastructure.stubs.event_sink_stub import EventSinkStub, SinkCall
from correlog.infrastructure.stubs.event_writer_stub import InMemoryEventWriter

__all__: list[str] = [
    "BuildIdentityProviderStub",
    "EventSinkStub",
    "InMemoryEventWriter",
    "SinkCall",
]
