"""Event sink port definition.

A sink is the destination-agnostic capability that accepts leveled events
and answers "would this level be recorded". The core never assumes a
specific destination.

Implementations must be safe for concurrent should_record calls and
concurrent emissions, and may have their threshold reconfigured while
logging is in progress.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from correlog.domain.value_objects.activity_identity import ActivityIdentity
from correlog.domain.value_objects.event_type import EventType, SourceLevel


class EventSinkProtocol(ABC):
    """Abstract protocol for trace event sinks.

    Emission methods filter on the threshold themselves; callers may also
    check should_record first to skip building the message entirely.
    Write failures propagate to the caller unchanged.
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Logical source name of this sink."""
        ...

    @property
    @abstractmethod
    def level(self) -> SourceLevel:
        """Current active threshold."""
        ...

    @level.setter
    @abstractmethod
    def level(self, value: SourceLevel) -> None: ...

    @abstractmethod
    def should_record(self, event_type: EventType) -> bool:
        """Whether an event of this type would be recorded right now.

        Args:
            event_type: Kind of event being considered.

        Returns:
            True if the active threshold admits the event.
        """
        ...

    @abstractmethod
    def emit(self, event_type: EventType, message: str, *args: object) -> None:
        """Record one event attributed to the ambient activity identity.

        When args are given, message is a positional format template and is
        formatted only if the event is recorded.

        Args:
            event_type: Kind of event.
            message: Message text or format template.
            *args: Template arguments.
        """
        ...

    @abstractmethod
    def emit_transfer(self, note: str, related_activity_id: ActivityIdentity) -> None:
        """Record a transfer from the ambient identity to another identity.

        Args:
            note: Human-readable description of the handoff.
            related_activity_id: Identity correlation is moving to.
        """
        ...
