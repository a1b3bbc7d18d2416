"""Activity identity value object.

An activity identity is an opaque, globally unique token naming one
logical operation instance. Events emitted while an activity is current
are attributed to its identity.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar
from uuid import UUID, uuid4


@dataclass(frozen=True)
class ActivityIdentity:
    """Immutable 128-bit activity identifier.

    The all-zero value is the root identity: the identity in effect when no
    activity scope is open.

    Attributes:
        value: The underlying UUID.
    """

    value: UUID

    ROOT: ClassVar[ActivityIdentity]

    @classmethod
    def generate(cls) -> ActivityIdentity:
        """Create a fresh random identity (UUID4)."""
        return cls(uuid4())

    @classmethod
    def parse(cls, text: str) -> ActivityIdentity:
        """Build an identity from its canonical string form.

        Raises:
            ValueError: If text is not a valid UUID.
        """
        return cls(UUID(text))

    @property
    def is_root(self) -> bool:
        """True for the all-zero root identity."""
        return self.value.int == 0

    def __str__(self) -> str:
        return str(self.value)


ActivityIdentity.ROOT = ActivityIdentity(UUID(int=0))
