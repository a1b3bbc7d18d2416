"""Event writer port definition.

Writers are the destinations registered on a sink (console, stream,
structured collector, metrics). A sink hands each recorded event to every
registered writer.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from correlog.domain.models.trace_event import TraceEvent


class EventWriterProtocol(ABC):
    """Abstract protocol for event destinations."""

    @abstractmethod
    def write(self, event: TraceEvent) -> None:
        """Write one recorded event.

        Args:
            event: The event, with correlation attribution resolved.
        """
        ...

    def flush(self) -> None:
        """Flush buffered output. Default is a no-op."""
