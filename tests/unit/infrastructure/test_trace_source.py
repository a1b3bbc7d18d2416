"""Unit tests for the TraceSource sink."""

import threading

import pytest

from correlog.application.services.activity_scope import ActivityScope
from correlog.application.services.logger import Logger
from correlog.domain.errors import InvalidArgumentError
from correlog.domain.value_objects.activity_identity import ActivityIdentity
from correlog.domain.value_objects.event_type import EventType, SourceLevel
from correlog.infrastructure.adapters.trace_source import TraceSource
from correlog.infrastructure.stubs import InMemoryEventWriter


class TestConfiguration:
    def test_empty_name_raises_invalid_argument(self) -> None:
        with pytest.raises(InvalidArgumentError):
            TraceSource("")

    def test_default_level_is_off(self) -> None:
        assert TraceSource("quiet").level is SourceLevel.OFF

    def test_level_can_be_reconfigured(self, source: TraceSource) -> None:
        assert source.should_record(EventType.INFORMATION)
        source.level = SourceLevel.ERROR
        assert not source.should_record(EventType.INFORMATION)
        assert source.should_record(EventType.ERROR)

    def test_writers_can_be_added_and_removed(self, source: TraceSource) -> None:
        extra = InMemoryEventWriter()
        source.add_writer(extra)
        assert extra in source.writers

        source.remove_writer(extra)
        assert extra not in source.writers

        source.clear_writers()
        assert source.writers == ()

    def test_add_missing_writer_raises(self, source: TraceSource) -> None:
        with pytest.raises(InvalidArgumentError):
            source.add_writer(None)  # type: ignore[arg-type]


class TestEmit:
    def test_recorded_event_reaches_every_writer(self, source: TraceSource) -> None:
        second = InMemoryEventWriter()
        source.add_writer(second)

        source.emit(EventType.WARNING, "low disk")

        for writer in source.writers:
            assert isinstance(writer, InMemoryEventWriter)
            assert [e.message for e in writer.events] == ["low disk"]

    def test_filtered_event_is_dropped(
        self, source: TraceSource, writer: InMemoryEventWriter
    ) -> None:
        source.emit(EventType.VERBOSE, "noise {0}", 1)
        assert writer.events == []

    def test_event_fields(self, source: TraceSource, writer: InMemoryEventWriter) -> None:
        source.emit(EventType.INFORMATION, "hello {0}", "world")

        (event,) = writer.events
        assert event.source == "test-source"
        assert event.event_type is EventType.INFORMATION
        assert event.message == "hello world"
        assert event.activity_id == ActivityIdentity.ROOT
        assert event.related_activity_id is None
        assert event.logical_operation_stack == ()
        assert event.thread_name == threading.current_thread().name
        assert event.event_id == 0

    def test_transfer_carries_related_identity(
        self, source: TraceSource, writer: InMemoryEventWriter
    ) -> None:
        target = ActivityIdentity.generate()
        source.emit_transfer("moving", target)

        (event,) = writer.events
        assert event.is_transfer
        assert event.related_activity_id == target

    def test_transfer_filtered_below_information(
        self, source: TraceSource, writer: InMemoryEventWriter
    ) -> None:
        source.level = SourceLevel.WARNING
        source.emit_transfer("moving", ActivityIdentity.generate())
        assert writer.events == []

    def test_events_inside_scope_are_correlated(
        self, source: TraceSource, writer: InMemoryEventWriter
    ) -> None:
        with ActivityScope(source, "Outer") as outer:
            with ActivityScope(source, "Inner") as inner:
                source.emit(EventType.INFORMATION, "work")

        work = next(e for e in writer.events if e.message == "work")
        assert work.activity_id == inner.activity_id
        assert work.logical_operation_stack == ("Outer", "Inner")

        stops = writer.of_type(EventType.STOP)
        assert [e.message for e in stops] == ["Inner", "Outer"]
        assert [e.activity_id for e in stops] == [inner.activity_id, outer.activity_id]

    def test_scenario_off_threshold(self, writer: InMemoryEventWriter) -> None:
        source = TraceSource("svc", level=SourceLevel.OFF, writers=[writer])
        Logger(source).log_info("x")
        assert writer.events == []

    def test_scenario_job_activity(self, source: TraceSource, writer: InMemoryEventWriter) -> None:
        Logger(source).start_new_activity("Job").release()

        assert [e.event_type for e in writer.events] == [
            EventType.TRANSFER,
            EventType.START,
            EventType.STOP,
            EventType.TRANSFER,
        ]
        assert [e.message for e in writer.of_type(EventType.START)] == ["Job"]

    def test_writer_failure_propagates(
        self, source: TraceSource, writer: InMemoryEventWriter
    ) -> None:
        writer.fail_with(OSError("write failed"))
        with pytest.raises(OSError, match="write failed"):
            source.emit(EventType.ERROR, "boom")

    def test_flush_reaches_writers(
        self, source: TraceSource, writer: InMemoryEventWriter
    ) -> None:
        source.flush()
        assert writer.flush_count == 1


class TestConcurrency:
    def test_concurrent_emission_from_threads(
        self, source: TraceSource, writer: InMemoryEventWriter
    ) -> None:
        logger = Logger(source)

        def work(index: int) -> None:
            with logger.start_new_activity("worker-{0}", index):
                for _ in range(25):
                    logger.log_info("tick")

        threads = [threading.Thread(target=work, args=(i,)) for i in range(8)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        ticks = [e for e in writer.events if e.message == "tick"]
        assert len(ticks) == 8 * 25
        # Every tick is attributed to the worker activity of its own thread
        starts = {e.thread_name: e.activity_id for e in writer.of_type(EventType.START)}
        for tick in ticks:
            assert tick.activity_id == starts[tick.thread_name]
            assert len(tick.logical_operation_stack) == 1
