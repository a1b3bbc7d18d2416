"""Structlog event writer.

Forwards trace events to structlog, so they flow through whatever
processors and renderer the process configured (see
correlog.infrastructure.observability.configure_structlog).
"""

from __future__ import annotations

from typing import Any

import structlog

from correlog.application.ports.event_writer import EventWriterProtocol
from correlog.domain.models.trace_event import TraceEvent
from correlog.domain.value_objects.event_type import EventType

# structlog method used for each event type
_METHODS: dict[EventType, str] = {
    EventType.CRITICAL: "critical",
    EventType.ERROR: "error",
    EventType.WARNING: "warning",
    EventType.INFORMATION: "info",
    EventType.VERBOSE: "debug",
    EventType.START: "info",
    EventType.STOP: "info",
    EventType.TRANSFER: "info",
}


class StructlogEventWriter(EventWriterProtocol):
    """Writes each event as one structlog entry.

    The entry's event is the message text. The event's own activity_id is
    passed explicitly, so a STOP written during release carries the
    stopping scope's identity.
    """

    def __init__(self, source_name: str, logger: Any | None = None) -> None:
        """Initialize the writer.

        Args:
            source_name: Bound as "source" on every entry.
            logger: structlog logger to use; defaults to structlog.get_logger().
        """
        base = logger if logger is not None else structlog.get_logger()
        self._log = base.bind(source=source_name)

    def write(self, event: TraceEvent) -> None:
        fields: dict[str, Any] = {
            "event_type": event.event_type.value,
            "activity_id": str(event.activity_id),
        }
        if event.logical_operation_stack:
            fields["logical_operation_stack"] = list(event.logical_operation_stack)
        if event.related_activity_id is not None:
            fields["related_activity_id"] = str(event.related_activity_id)
        method = getattr(self._log, _METHODS[event.event_type])
        method(event.message, **fields)
