"""Unit tests for trace event Prometheus metrics."""

from collections.abc import Iterator

import pytest
from prometheus_client import CollectorRegistry

from correlog.application.services.logger import Logger
from correlog.domain.value_objects.event_type import SourceLevel
from correlog.infrastructure.adapters.trace_source import TraceSource
from correlog.infrastructure.monitoring import (
    MetricsEventWriter,
    TraceEventMetricsCollector,
    generate_metrics,
    get_trace_event_metrics_collector,
    reset_trace_event_metrics_collector,
)


@pytest.fixture
def collector() -> TraceEventMetricsCollector:
    return TraceEventMetricsCollector(registry=CollectorRegistry())


@pytest.fixture
def fresh_singleton() -> Iterator[None]:
    reset_trace_event_metrics_collector()
    yield
    reset_trace_event_metrics_collector()


def _sample(
    collector: TraceEventMetricsCollector, name: str, labels: dict[str, str]
) -> float | None:
    return collector.get_registry().get_sample_value(name, labels)


class TestMetricsEventWriter:
    def test_counts_events_by_source_and_type(
        self, collector: TraceEventMetricsCollector
    ) -> None:
        source = TraceSource(
            "billing",
            level=SourceLevel.INFORMATION,
            writers=[MetricsEventWriter(collector)],
        )
        logger = Logger(source)
        logger.log_info("one")
        logger.log_info("two")
        logger.log_error("three")
        logger.log_verbose("filtered")

        info = _sample(
            collector,
            "correlog_trace_events_total",
            {"source": "billing", "event_type": "information"},
        )
        error = _sample(
            collector,
            "correlog_trace_events_total",
            {"source": "billing", "event_type": "error"},
        )
        verbose = _sample(
            collector,
            "correlog_trace_events_total",
            {"source": "billing", "event_type": "verbose"},
        )
        assert info == 2.0
        assert error == 1.0
        assert verbose is None

    def test_tracks_open_scopes(self, collector: TraceEventMetricsCollector) -> None:
        source = TraceSource(
            "jobs",
            level=SourceLevel.INFORMATION,
            writers=[MetricsEventWriter(collector)],
        )
        logger = Logger(source)
        labels = {"source": "jobs"}

        with logger.start_new_activity("outer"):
            with logger.start_new_activity("inner"):
                assert _sample(collector, "correlog_open_activity_scopes", labels) == 2.0
        assert _sample(collector, "correlog_open_activity_scopes", labels) == 0.0


class TestSingleton:
    def test_singleton_is_reused(self, fresh_singleton: None) -> None:
        assert get_trace_event_metrics_collector() is get_trace_event_metrics_collector()

    def test_generate_metrics_exposition(self, fresh_singleton: None) -> None:
        get_trace_event_metrics_collector().record_event("svc", "information")
        assert b"correlog_trace_events_total" in generate_metrics()
