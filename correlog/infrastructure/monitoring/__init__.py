"""Prometheus monitoring for trace events."""

from correlog.infrastructure.monitoring.event_metrics import (
    METRICS_CONTENT_TYPE,
    TraceEventMetricsCollector,
    generate_metrics,
    get_trace_event_metrics_collector,
    reset_trace_event_metrics_collector,
)
from correlog.infrastructure.monitoring.metrics_event_writer import MetricsEventWriter

__all__: list[str] = [
    "METRICS_CONTENT_TYPE",
    "MetricsEventWriter",
    "TraceEventMetricsCollector",
    "generate_metrics",
    "get_trace_event_metrics_collector",
    "reset_trace_event_metrics_collector",
]
