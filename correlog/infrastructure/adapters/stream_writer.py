"""Plain text stream writer.

Writes one line per event in the classic trace listener layout:

    billing Information: 0 : hello world
    billing Transfer: 0 : Transferring to new activity..., relatedActivityId=<uuid>

Optionally followed by an indented ActivityId line.
"""

from __future__ import annotations

import sys
import threading
from typing import TextIO

from correlog.application.ports.event_writer import EventWriterProtocol
from correlog.config.logging_config import DEFAULT_MAX_MESSAGE_SIZE
from correlog.domain.models.trace_event import TraceEvent

TRUNCATION_MARKER = "..."


class StreamEventWriter(EventWriterProtocol):
    """Writes events as text lines to a stream."""

    def __init__(
        self,
        stream: TextIO | None = None,
        max_message_size: int = DEFAULT_MAX_MESSAGE_SIZE,
        include_activity_id: bool = False,
    ) -> None:
        """Initialize the writer.

        Args:
            stream: Destination; defaults to sys.stderr at write time.
            max_message_size: Messages longer than this are truncated.
            include_activity_id: Also write the event's activity identity.
        """
        self._stream = stream
        self._max_message_size = max_message_size
        self._include_activity_id = include_activity_id
        self._lock = threading.Lock()

    @property
    def stream(self) -> TextIO:
        return self._stream if self._stream is not None else sys.stderr

    def format(self, event: TraceEvent) -> str:
        """Render an event as text, without a trailing newline."""
        message = self._truncate(event.message)
        if event.related_activity_id is not None:
            message = f"{message}, relatedActivityId={event.related_activity_id}"
        line = f"{event.source} {event.event_type.display_name}: {event.event_id} : {message}"
        if self._include_activity_id:
            line = f"{line}\n    ActivityId={event.activity_id}"
        return line

    def write(self, event: TraceEvent) -> None:
        text = self.format(event)
        with self._lock:
            self.stream.write(text + "\n")

    def flush(self) -> None:
        with self._lock:
            self.stream.flush()

    def _truncate(self, message: str) -> str:
        if len(message) <= self._max_message_size:
            return message
        keep = max(self._max_message_size - len(TRUNCATION_MARKER), 0)
        return message[:keep] + TRUNCATION_MARKER
