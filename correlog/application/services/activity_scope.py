"""Scoped activity tracking.

An ActivityScope represents one open nesting level of logical operations.
Opening it moves the call chain's correlation to a fresh activity identity
and pushes the activity name; releasing it restores exactly the identity
that was current before it opened.

Usage:
    with ActivityScope(sink, "Import batch"):
        ...
        with ActivityScope(sink, "Parse file"):
            ...

Ordering:
    open:    TRANSFER(new id), push state, START(name)
    release: STOP(name), TRANSFER(saved id), pop state

State restoration on release runs in a finally block, so it is committed
before any sink failure from STOP or TRANSFER reaches the caller. A START
failure during open rolls the push back, so a failed open leaves no
partial state.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from types import TracebackType
from typing import ClassVar

import structlog

from correlog.application.ports.event_sink import EventSinkProtocol
from correlog.domain.errors.argument import InvalidArgumentError
from correlog.domain.services.correlation import pop_activity, push_activity
from correlog.domain.value_objects.activity_identity import ActivityIdentity
from correlog.domain.value_objects.event_type import EventType

logger = structlog.get_logger(__name__)

TRANSFER_IN_NOTE = "Transferring to new activity..."
TRANSFER_BACK_NOTE = "Transferring back to the previous activity..."


class ActivityTracker(ABC):
    """Scoped activity tracker with guaranteed release.

    Both the live ActivityScope and the NullActivityScope implement this,
    so callers hold either through one interface and release it with a
    with-block.
    """

    @property
    @abstractmethod
    def activity_name(self) -> str:
        """Name of the tracked activity; empty for the null tracker."""
        ...

    @property
    @abstractmethod
    def is_live(self) -> bool:
        """False for the null tracker."""
        ...

    @abstractmethod
    def release(self) -> None:
        """End the tracked activity."""
        ...

    def __enter__(self) -> ActivityTracker:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.release()


class ActivityScope(ActivityTracker):
    """Live activity scope bound to one sink.

    All fields are fixed at construction. The scope remembers the identity
    that was current when it opened and restores that identity on release,
    rather than computing a target from shared state at release time.

    Attributes:
        activity_name: Caller-supplied activity name.
        activity_id: Identity generated for this scope.
        saved_activity_id: Identity in effect immediately before open.
        sink: Sink receiving this scope's START/STOP/TRANSFER events.
    """

    NULL_SCOPE: ClassVar[NullActivityScope]

    def __init__(self, sink: EventSinkProtocol, activity_name: str) -> None:
        """Open the scope.

        Args:
            sink: Sink for this scope's events.
            activity_name: Name pushed onto the logical operation stack.

        Raises:
            InvalidArgumentError: If sink is None. Nothing is mutated.
        """
        if sink is None:
            raise InvalidArgumentError("sink")

        self._sink = sink
        self._activity_name = activity_name
        self._activity_id = ActivityIdentity.generate()
        self._released = False

        sink.emit_transfer(TRANSFER_IN_NOTE, self._activity_id)

        self._saved_activity_id = push_activity(self._activity_id, activity_name)
        try:
            sink.emit(EventType.START, activity_name)
        except BaseException:
            pop_activity(self._saved_activity_id)
            raise

    @property
    def activity_name(self) -> str:
        return self._activity_name

    @property
    def activity_id(self) -> ActivityIdentity:
        return self._activity_id

    @property
    def saved_activity_id(self) -> ActivityIdentity:
        return self._saved_activity_id

    @property
    def sink(self) -> EventSinkProtocol:
        return self._sink

    @property
    def is_live(self) -> bool:
        return True

    @property
    def released(self) -> bool:
        return self._released

    def release(self) -> None:
        """Stop the activity and restore the previous correlation state.

        Emits STOP and the transfer back, then pops the stack and restores
        saved_activity_id. Restoration happens even if an emission raises;
        the sink error then propagates. Releasing twice is a caller bug and
        the second call does nothing.
        """
        if self._released:
            logger.debug(
                "activity_scope_already_released",
                activity_name=self._activity_name,
                activity_id=str(self._activity_id),
            )
            return
        self._released = True

        try:
            self._sink.emit(EventType.STOP, self._activity_name)
            self._sink.emit_transfer(TRANSFER_BACK_NOTE, self._saved_activity_id)
        finally:
            pop_activity(self._saved_activity_id)

    def __enter__(self) -> ActivityScope:
        return self

    def __repr__(self) -> str:
        return (
            f"ActivityScope(activity_name={self._activity_name!r}, "
            f"activity_id={self._activity_id}, released={self._released})"
        )


class NullActivityScope(ActivityTracker):
    """Tracker that does nothing.

    Handed out when the sink would not record a START event anyway, to skip
    identity generation, locking and sink I/O. Stateless, so a single
    instance is shared by all callers.
    """

    @property
    def activity_name(self) -> str:
        return ""

    @property
    def is_live(self) -> bool:
        return False

    def release(self) -> None:
        pass

    def __enter__(self) -> NullActivityScope:
        return self

    def __repr__(self) -> str:
        return "NullActivityScope()"


NULL_SCOPE = NullActivityScope()
ActivityScope.NULL_SCOPE = NULL_SCOPE
