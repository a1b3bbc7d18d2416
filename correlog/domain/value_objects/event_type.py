"""Event kinds and source thresholds.

EventType names what an event is; SourceLevel is the verbosity threshold a
sink is configured with. Severities use the stdlib logging numbers so a
threshold can be handed straight to structlog's filtering logger.

Activity events (START, STOP, TRANSFER) carry INFORMATION severity: a
source at INFORMATION or more verbose records activity tracking, a source
at WARNING or quieter does not.
"""

from __future__ import annotations

import logging
from enum import Enum, IntEnum

from correlog.domain.errors.argument import InvalidArgumentError


class EventType(Enum):
    """Kind of trace event.

    Values:
        CRITICAL: Unrecoverable failure.
        ERROR: Recoverable failure.
        WARNING: Unexpected but handled condition.
        INFORMATION: Informational message.
        VERBOSE: Debugging detail.
        START: An activity started.
        STOP: An activity stopped.
        TRANSFER: Correlation moved from one activity identity to another.
    """

    CRITICAL = "critical"
    ERROR = "error"
    WARNING = "warning"
    INFORMATION = "information"
    VERBOSE = "verbose"
    START = "start"
    STOP = "stop"
    TRANSFER = "transfer"

    @property
    def severity(self) -> int:
        """Numeric severity on the stdlib logging scale."""
        return _SEVERITIES[self]

    @property
    def is_activity_event(self) -> bool:
        """True for START, STOP and TRANSFER."""
        return self in (EventType.START, EventType.STOP, EventType.TRANSFER)

    @property
    def display_name(self) -> str:
        """Capitalized name used in text output (e.g. "Information")."""
        return self.value.capitalize()


_SEVERITIES: dict[EventType, int] = {
    EventType.CRITICAL: logging.CRITICAL,
    EventType.ERROR: logging.ERROR,
    EventType.WARNING: logging.WARNING,
    EventType.INFORMATION: logging.INFO,
    EventType.VERBOSE: logging.DEBUG,
    EventType.START: logging.INFO,
    EventType.STOP: logging.INFO,
    EventType.TRANSFER: logging.INFO,
}


class SourceLevel(IntEnum):
    """Verbosity threshold of a sink.

    An event is recorded iff the level is not OFF and the event severity is
    at or above the level value.
    """

    OFF = logging.CRITICAL + 10
    CRITICAL = logging.CRITICAL
    ERROR = logging.ERROR
    WARNING = logging.WARNING
    INFORMATION = logging.INFO
    VERBOSE = logging.DEBUG
    ALL = logging.NOTSET

    def allows(self, event_type: EventType) -> bool:
        """Whether an event of the given type passes this threshold."""
        if self is SourceLevel.OFF:
            return False
        return event_type.severity >= self.value

    @classmethod
    def parse(cls, text: str) -> SourceLevel:
        """Parse a level name, case-insensitively.

        Accepts the member names plus the aliases "info", "debug" and
        "warn".

        Raises:
            InvalidArgumentError: If text names no known level.
        """
        key = (text or "").strip().upper()
        key = _LEVEL_ALIASES.get(key, key)
        try:
            return cls[key]
        except KeyError:
            raise InvalidArgumentError(
                "level", f"unknown source level '{text}'"
            ) from None


_LEVEL_ALIASES: dict[str, str] = {
    "INFO": "INFORMATION",
    "DEBUG": "VERBOSE",
    "WARN": "WARNING",
    "NONE": "OFF",
}
