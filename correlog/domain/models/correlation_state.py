"""Correlation state snapshot.

The current activity identity and the logical operation stack are stored
together as one immutable value, so a reader can never observe a state in
which one has advanced and the other has not.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from correlog.domain.value_objects.activity_identity import ActivityIdentity


@dataclass(frozen=True)
class CorrelationState:
    """Immutable correlation snapshot for one call chain.

    Attributes:
        activity_id: Identity attributed to events emitted right now.
        operation_stack: Names of the open logical operations, innermost last.
    """

    activity_id: ActivityIdentity = ActivityIdentity.ROOT
    operation_stack: tuple[str, ...] = field(default_factory=tuple)

    @property
    def depth(self) -> int:
        """Number of open logical operations."""
        return len(self.operation_stack)

    @property
    def current_operation(self) -> str | None:
        """Innermost logical operation name, or None at the root."""
        return self.operation_stack[-1] if self.operation_stack else None

    def pushed(self, activity_id: ActivityIdentity, name: str) -> CorrelationState:
        """Return a state with the new identity installed and name pushed."""
        return CorrelationState(
            activity_id=activity_id,
            operation_stack=self.operation_stack + (name,),
        )

    def popped(self, restored_id: ActivityIdentity) -> CorrelationState:
        """Return a state with the top name popped and restored_id installed.

        Popping an empty stack leaves it empty.
        """
        return CorrelationState(
            activity_id=restored_id,
            operation_stack=self.operation_stack[:-1],
        )


ROOT_STATE = CorrelationState()
