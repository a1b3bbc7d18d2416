"""Domain services for correlog."""

from correlog.domain.services.correlation import (
    get_activity_id,
    get_correlation_state,
    get_operation_stack,
    pop_activity,
    push_activity,
    reset_correlation_state,
)

__all__: list[str] = [
    "get_activity_id",
    "get_correlation_state",
    "get_operation_stack",
    "pop_activity",
    "push_activity",
    "reset_correlation_state",
]
