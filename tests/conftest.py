"""
Pytest configuration and shared fixtures for correlog tests.

Testing Standards:
- Async tests use pytest.mark.asyncio (auto mode enabled in pyproject.toml)
- Unit tests go in tests/unit/, mirroring the package layers
- Integration tests go in tests/integration/
- Every test starts at the root correlation state
"""

from collections.abc import Iterator

import pytest
import structlog

from correlog.domain.services.correlation import reset_correlation_state
from correlog.domain.value_objects.event_type import SourceLevel
from correlog.infrastructure.adapters.trace_source import TraceSource
from correlog.infrastructure.stubs import EventSinkStub, InMemoryEventWriter


@pytest.fixture(autouse=True)
def root_correlation_state() -> Iterator[None]:
    """Start and finish every test at the root correlation state."""
    reset_correlation_state()
    yield
    reset_correlation_state()


@pytest.fixture(autouse=True)
def structlog_defaults() -> Iterator[None]:
    """Undo structlog configuration made by a test."""
    yield
    structlog.reset_defaults()


@pytest.fixture
def anyio_backend() -> str:
    """Use asyncio as the async backend."""
    return "asyncio"


@pytest.fixture
def project_version() -> str:
    """Provide the current project version for tests."""
    from correlog import __version__

    return __version__


@pytest.fixture
def sink() -> EventSinkStub:
    """Recording sink that admits every event type."""
    return EventSinkStub(level=SourceLevel.ALL)


@pytest.fixture
def writer() -> InMemoryEventWriter:
    return InMemoryEventWriter()


@pytest.fixture
def source(writer: InMemoryEventWriter) -> TraceSource:
    """TraceSource at INFORMATION writing to an in-memory writer."""
    return TraceSource("test-source", level=SourceLevel.INFORMATION, writers=[writer])
