"""Trace event domain model.

A TraceEvent is what a sink hands to its writers: one recorded event with
its correlation attribution already resolved.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone

from correlog.domain.value_objects.activity_identity import ActivityIdentity
from correlog.domain.value_objects.event_type import EventType


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


@dataclass(frozen=True)
class TraceEvent:
    """One recorded trace event.

    Attributes:
        source: Name of the sink that recorded the event.
        event_type: Kind of event.
        message: Fully formatted message text.
        activity_id: Activity identity current when the event was emitted.
        related_activity_id: Target identity of a TRANSFER event, else None.
        logical_operation_stack: Open operation names, innermost last.
        timestamp: When the event was recorded (UTC).
        thread_name: Name of the emitting thread.
        event_id: Numeric event id; always 0.
    """

    source: str
    event_type: EventType
    message: str
    activity_id: ActivityIdentity
    related_activity_id: ActivityIdentity | None = None
    logical_operation_stack: tuple[str, ...] = ()
    timestamp: datetime = field(default_factory=_utc_now)
    thread_name: str = ""
    event_id: int = 0

    @property
    def is_transfer(self) -> bool:
        return self.event_type is EventType.TRANSFER
