"""Named sink registry port definition.

Maps a logical source name to a single shared sink, so repeated lookups by
the same name reuse one sink instead of duplicating its configuration.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from correlog.application.ports.event_sink import EventSinkProtocol


class SinkRegistryProtocol(ABC):
    """Abstract protocol for the keyed sink registry."""

    @abstractmethod
    def get_or_create(self, name: str) -> EventSinkProtocol:
        """Return the sink for name, creating it on first lookup.

        Args:
            name: Non-empty logical source name.

        Returns:
            The same sink instance for every lookup of the same name.

        Raises:
            InvalidArgumentError: If name is None or empty.
        """
        ...

    @abstractmethod
    def names(self) -> list[str]:
        """Names of all sinks created so far, sorted."""
        ...
