"""Trace source - the default event sink.

A TraceSource is a named sink with a reconfigurable threshold and a
registrable set of writers. Recorded events are stamped with the ambient
correlation state of the emitting call chain and handed to every writer.

Writer failures are not caught: they propagate to the emitting caller.
"""

from __future__ import annotations

import threading
from collections.abc import Iterable

from correlog.application.ports.event_sink import EventSinkProtocol
from correlog.application.ports.event_writer import EventWriterProtocol
from correlog.domain.errors.argument import InvalidArgumentError
from correlog.domain.models.trace_event import TraceEvent
from correlog.domain.services.correlation import get_correlation_state
from correlog.domain.value_objects.activity_identity import ActivityIdentity
from correlog.domain.value_objects.event_type import EventType, SourceLevel


class TraceSource(EventSinkProtocol):
    """Named event sink dispatching to registered writers.

    The level and writer list may be changed while other threads log.
    Emission takes a snapshot of the writer list, so a writer added during
    an emission only sees later events.

    Usage:
        source = TraceSource("billing", level=SourceLevel.INFORMATION)
        source.add_writer(StreamEventWriter(sys.stderr))
        source.emit(EventType.INFORMATION, "hello {0}", "world")
    """

    def __init__(
        self,
        name: str,
        level: SourceLevel = SourceLevel.OFF,
        writers: Iterable[EventWriterProtocol] = (),
    ) -> None:
        """Initialize the source.

        Args:
            name: Non-empty source name.
            level: Initial threshold. Defaults to OFF.
            writers: Initial writers.

        Raises:
            InvalidArgumentError: If name is None or empty.
        """
        if not name:
            raise InvalidArgumentError("name")
        self._name = name
        self._level = SourceLevel(level)
        self._writers: tuple[EventWriterProtocol, ...] = tuple(writers)
        self._lock = threading.Lock()

    @property
    def name(self) -> str:
        return self._name

    @property
    def level(self) -> SourceLevel:
        return self._level

    @level.setter
    def level(self, value: SourceLevel) -> None:
        with self._lock:
            self._level = SourceLevel(value)

    @property
    def writers(self) -> tuple[EventWriterProtocol, ...]:
        """Snapshot of the registered writers."""
        return self._writers

    def add_writer(self, writer: EventWriterProtocol) -> None:
        if writer is None:
            raise InvalidArgumentError("writer")
        with self._lock:
            self._writers = self._writers + (writer,)

    def remove_writer(self, writer: EventWriterProtocol) -> None:
        """Unregister a writer; unknown writers are ignored."""
        with self._lock:
            self._writers = tuple(w for w in self._writers if w is not writer)

    def clear_writers(self) -> None:
        with self._lock:
            self._writers = ()

    def should_record(self, event_type: EventType) -> bool:
        return self._level.allows(event_type)

    def emit(self, event_type: EventType, message: str, *args: object) -> None:
        """Record an event, formatting message with args only if it passes.

        Formatting is str.format with positional fields. It is locale
        independent apart from the "n" presentation type, which follows
        the process locale.
        """
        if not self.should_record(event_type):
            return
        text = message.format(*args) if args else str(message)
        self._dispatch(event_type, text)

    def emit_transfer(self, note: str, related_activity_id: ActivityIdentity) -> None:
        if not self.should_record(EventType.TRANSFER):
            return
        self._dispatch(EventType.TRANSFER, note, related_activity_id)

    def flush(self) -> None:
        for writer in self._writers:
            writer.flush()

    def _dispatch(
        self,
        event_type: EventType,
        message: str,
        related_activity_id: ActivityIdentity | None = None,
    ) -> None:
        state = get_correlation_state()
        event = TraceEvent(
            source=self._name,
            event_type=event_type,
            message=message,
            activity_id=state.activity_id,
            related_activity_id=related_activity_id,
            logical_operation_stack=state.operation_stack,
            thread_name=threading.current_thread().name,
        )
        for writer in self._writers:
            writer.write(event)

    def __repr__(self) -> str:
        return f"TraceSource(name={self._name!r}, level={self._level.name})"
