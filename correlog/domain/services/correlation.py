"""Correlation state management.

The current activity identity and the logical operation stack live in a
context variable, so each thread and each asyncio task has its own call
chain: a new thread starts at the root state and a task starts from a copy
of its creator's state. Within one chain every read-modify-write goes
through a single lock, so the identity and the stack always change together.

Usage:
    saved = push_activity(new_id, "Import batch")
    try:
        ...
    finally:
        pop_activity(saved)
"""

from __future__ import annotations

import threading
from contextvars import ContextVar

from correlog.domain.models.correlation_state import ROOT_STATE, CorrelationState
from correlog.domain.value_objects.activity_identity import ActivityIdentity

_correlation_state: ContextVar[CorrelationState] = ContextVar(
    "correlog_correlation_state", default=ROOT_STATE
)

# Guards the save/install/push and pop/restore sequences
_correlation_lock = threading.Lock()


def get_correlation_state() -> CorrelationState:
    """Get the correlation snapshot of the current call chain."""
    return _correlation_state.get()


def get_activity_id() -> ActivityIdentity:
    """Get the activity identity attributed to events emitted right now.

    Returns:
        The innermost open activity's identity, or ActivityIdentity.ROOT.
    """
    return _correlation_state.get().activity_id


def get_operation_stack() -> tuple[str, ...]:
    """Get the open logical operation names, innermost last."""
    return _correlation_state.get().operation_stack


def push_activity(activity_id: ActivityIdentity, name: str) -> ActivityIdentity:
    """Install a new current identity and push an operation name.

    Args:
        activity_id: Identity to make current.
        name: Logical operation name to push.

    Returns:
        The identity that was current before the push.
    """
    with _correlation_lock:
        state = _correlation_state.get()
        _correlation_state.set(state.pushed(activity_id, name))
    return state.activity_id


def pop_activity(saved_id: ActivityIdentity) -> None:
    """Pop the innermost operation name and restore a saved identity.

    Args:
        saved_id: The identity returned by the matching push_activity call.
    """
    with _correlation_lock:
        state = _correlation_state.get()
        _correlation_state.set(state.popped(saved_id))


def reset_correlation_state() -> None:
    """Return the current call chain to the root state."""
    with _correlation_lock:
        _correlation_state.set(ROOT_STATE)
