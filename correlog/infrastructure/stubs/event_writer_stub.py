"""In-memory event writer for tests."""

from __future__ import annotations

from correlog.application.ports.event_writer import EventWriterProtocol
from correlog.domain.models.trace_event import TraceEvent
from correlog.domain.value_objects.event_type import EventType


class InMemoryEventWriter(EventWriterProtocol):
    """Collects written events in a list.

    Optionally raises a configured error after collecting, to simulate a
    failing destination.
    """

    def __init__(self) -> None:
        self.events: list[TraceEvent] = []
        self.flush_count = 0
        self._error: BaseException | None = None

    def fail_with(self, error: BaseException | None) -> None:
        """Raise error on every subsequent write; None stops failing."""
        self._error = error

    def write(self, event: TraceEvent) -> None:
        self.events.append(event)
        if self._error is not None:
            raise self._error

    def flush(self) -> None:
        self.flush_count += 1

    def of_type(self, event_type: EventType) -> list[TraceEvent]:
        return [e for e in self.events if e.event_type is event_type]

    def clear(self) -> None:
        self.events.clear()
        self.flush_count = 0
        self._error = None
