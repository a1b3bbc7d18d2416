"""Event writer that feeds the Prometheus collector."""

from __future__ import annotations

from correlog.application.ports.event_writer import EventWriterProtocol
from correlog.domain.models.trace_event import TraceEvent
from correlog.domain.value_objects.event_type import EventType
from correlog.infrastructure.monitoring.event_metrics import (
    TraceEventMetricsCollector,
    get_trace_event_metrics_collector,
)


class MetricsEventWriter(EventWriterProtocol):
    """Counts events instead of writing them anywhere."""

    def __init__(self, collector: TraceEventMetricsCollector | None = None) -> None:
        """Initialize the writer.

        Args:
            collector: Collector to feed; defaults to the process singleton.
        """
        self._metrics = collector or get_trace_event_metrics_collector()

    def write(self, event: TraceEvent) -> None:
        self._metrics.record_event(event.source, event.event_type.value)
        if event.event_type is EventType.START:
            self._metrics.record_activity_started(event.source)
        elif event.event_type is EventType.STOP:
            self._metrics.record_activity_stopped(event.source)
