"""Trace event metrics for Prometheus exposition.

Counts recorded trace events per source and event type, and tracks how
many activity scopes are open per source.
"""

from __future__ import annotations

import threading

from prometheus_client import (
    CONTENT_TYPE_LATEST,
    CollectorRegistry,
    Counter,
    Gauge,
    generate_latest,
)

METRICS_CONTENT_TYPE = CONTENT_TYPE_LATEST

# Thread lock for singleton initialization
_metrics_lock = threading.Lock()


class TraceEventMetricsCollector:
    """Collects trace event metrics for Prometheus.

    Attributes:
        trace_events_total: Counter of recorded events by source and type.
        open_activity_scopes: Gauge of open activity scopes by source.
    """

    def __init__(self, registry: CollectorRegistry | None = None) -> None:
        """Initialize the collector.

        Args:
            registry: Optional custom registry for testing isolation.
        """
        self._registry = registry or CollectorRegistry()

        self.trace_events_total = Counter(
            name="correlog_trace_events_total",
            documentation="Total trace events recorded per source and event type",
            labelnames=["source", "event_type"],
            registry=self._registry,
        )

        # START increments, STOP decrements
        self.open_activity_scopes = Gauge(
            name="correlog_open_activity_scopes",
            documentation="Activity scopes currently open per source",
            labelnames=["source"],
            registry=self._registry,
        )

    def record_event(self, source: str, event_type: str) -> None:
        """Count one recorded event.

        Args:
            source: Source name.
            event_type: EventType value (e.g. "information").
        """
        self.trace_events_total.labels(source=source, event_type=event_type).inc()

    def record_activity_started(self, source: str) -> None:
        self.open_activity_scopes.labels(source=source).inc()

    def record_activity_stopped(self, source: str) -> None:
        self.open_activity_scopes.labels(source=source).dec()

    def get_registry(self) -> CollectorRegistry:
        """Get the collector registry."""
        return self._registry


# Singleton instance
_trace_event_metrics_collector: TraceEventMetricsCollector | None = None


def get_trace_event_metrics_collector() -> TraceEventMetricsCollector:
    """Get the singleton TraceEventMetricsCollector instance (thread-safe).

    Uses double-checked locking for thread-safe lazy initialization.
    """
    global _trace_event_metrics_collector
    if _trace_event_metrics_collector is None:
        with _metrics_lock:
            # Double-check inside lock
            if _trace_event_metrics_collector is None:
                _trace_event_metrics_collector = TraceEventMetricsCollector()
    return _trace_event_metrics_collector


def reset_trace_event_metrics_collector() -> None:
    """Reset the singleton collector (for testing only)."""
    global _trace_event_metrics_collector
    with _metrics_lock:
        _trace_event_metrics_collector = None


def generate_metrics() -> bytes:
    """Render the singleton collector's registry in exposition format."""
    return generate_latest(get_trace_event_metrics_collector().get_registry())
