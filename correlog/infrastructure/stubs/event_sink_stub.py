"""Event Sink Stub - Test implementation.

Records every emission together with the correlation state observed at
the moment of the call, and can be told to fail on chosen event types.
"""

from __future__ import annotations

from dataclasses import dataclass

from correlog.application.ports.event_sink import EventSinkProtocol
from correlog.domain.services.correlation import get_correlation_state
from correlog.domain.value_objects.activity_identity import ActivityIdentity
from correlog.domain.value_objects.event_type import EventType, SourceLevel


@dataclass(frozen=True)
class SinkCall:
    """One recorded emission.

    Attributes:
        event_type: Kind of event.
        message: Formatted message (the note for transfers).
        activity_id: Ambient identity at emission time.
        operation_stack: Ambient operation stack at emission time.
        related_activity_id: Transfer target, None for other events.
    """

    event_type: EventType
    message: str
    activity_id: ActivityIdentity
    operation_stack: tuple[str, ...]
    related_activity_id: ActivityIdentity | None = None


class EventSinkStub(EventSinkProtocol):
    """Stub implementation of EventSinkProtocol for testing.

    Usage:
        sink = EventSinkStub(level=SourceLevel.INFORMATION)
        Logger(sink).log_info("hello {0}", "world")
        assert sink.messages == ["hello world"]

        # Make STOP emissions raise
        sink.fail_on(EventType.STOP, OSError("disk full"))

        # Clean up for next test
        sink.clear()
    """

    def __init__(self, name: str = "stub", level: SourceLevel = SourceLevel.ALL) -> None:
        """Initialize the stub with empty state."""
        self._name = name
        self._level = level
        self.calls: list[SinkCall] = []
        self.should_record_checks: list[EventType] = []
        self._failures: dict[EventType, BaseException] = {}

    @property
    def name(self) -> str:
        return self._name

    @property
    def level(self) -> SourceLevel:
        return self._level

    @level.setter
    def level(self, value: SourceLevel) -> None:
        self._level = value

    @property
    def event_types(self) -> list[EventType]:
        return [call.event_type for call in self.calls]

    @property
    def messages(self) -> list[str]:
        return [call.message for call in self.calls]

    def fail_on(self, event_type: EventType, error: BaseException) -> None:
        """Raise error from the next emissions of event_type (after recording)."""
        self._failures[event_type] = error

    def should_record(self, event_type: EventType) -> bool:
        self.should_record_checks.append(event_type)
        return self._level.allows(event_type)

    def emit(self, event_type: EventType, message: str, *args: object) -> None:
        if not self._level.allows(event_type):
            return
        self._record(event_type, message.format(*args) if args else message)

    def emit_transfer(self, note: str, related_activity_id: ActivityIdentity) -> None:
        if not self._level.allows(EventType.TRANSFER):
            return
        self._record(EventType.TRANSFER, note, related_activity_id)

    def clear(self) -> None:
        """Clear recorded calls and configured failures for test isolation."""
        self.calls.clear()
        self.should_record_checks.clear()
        self._failures.clear()

    def _record(
        self,
        event_type: EventType,
        message: str,
        related_activity_id: ActivityIdentity | None = None,
    ) -> None:
        state = get_correlation_state()
        self.calls.append(
            SinkCall(
                event_type=event_type,
                message=message,
                activity_id=state.activity_id,
                operation_stack=state.operation_stack,
                related_activity_id=related_activity_id,
            )
        )
        failure = self._failures.get(event_type)
        if failure is not None:
            raise failure
