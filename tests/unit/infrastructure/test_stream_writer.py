"""Unit tests for the plain text stream writer."""

from io import StringIO

from correlog.domain.models.trace_event import TraceEvent
from correlog.domain.value_objects.activity_identity import ActivityIdentity
from correlog.domain.value_objects.event_type import EventType, SourceLevel
from correlog.infrastructure.adapters.stream_writer import (
    TRUNCATION_MARKER,
    StreamEventWriter,
)
from correlog.infrastructure.adapters.trace_source import TraceSource


def _event(message: str, event_type: EventType = EventType.INFORMATION) -> TraceEvent:
    return TraceEvent(
        source="billing",
        event_type=event_type,
        message=message,
        activity_id=ActivityIdentity.ROOT,
    )


class TestStreamEventWriter:
    def test_line_layout(self) -> None:
        stream = StringIO()
        StreamEventWriter(stream).write(_event("hello world"))
        assert stream.getvalue() == "billing Information: 0 : hello world\n"

    def test_transfer_line_names_target(self) -> None:
        target = ActivityIdentity.generate()
        event = TraceEvent(
            source="billing",
            event_type=EventType.TRANSFER,
            message="Transferring to new activity...",
            activity_id=ActivityIdentity.ROOT,
            related_activity_id=target,
        )
        line = StreamEventWriter(StringIO()).format(event)
        assert line == (
            "billing Transfer: 0 : Transferring to new activity..., "
            f"relatedActivityId={target}"
        )

    def test_activity_id_line(self) -> None:
        identity = ActivityIdentity.generate()
        event = TraceEvent(
            source="billing",
            event_type=EventType.START,
            message="Job",
            activity_id=identity,
        )
        text = StreamEventWriter(StringIO(), include_activity_id=True).format(event)
        assert text.splitlines()[1] == f"    ActivityId={identity}"

    def test_long_message_is_truncated(self) -> None:
        writer = StreamEventWriter(StringIO(), max_message_size=300)
        line = writer.format(_event("x" * 1000))
        message = line.split(" : ", 1)[1]
        assert len(message) == 300
        assert message.endswith(TRUNCATION_MARKER)

    def test_message_at_limit_is_kept(self) -> None:
        writer = StreamEventWriter(StringIO(), max_message_size=300)
        line = writer.format(_event("y" * 300))
        assert line.endswith("y" * 300)

    def test_with_trace_source(self) -> None:
        stream = StringIO()
        source = TraceSource(
            "svc", level=SourceLevel.INFORMATION, writers=[StreamEventWriter(stream)]
        )
        source.emit(EventType.INFORMATION, "hello {0}", "world")
        source.emit(EventType.VERBOSE, "hidden")
        assert stream.getvalue().splitlines() == ["svc Information: 0 : hello world"]
