"""Structlog processors for activity correlation.

These processors read the ambient correlation state of the current call
chain and add it to every structlog entry, so plain structlog calls made
inside an activity scope correlate with the trace events of that scope.

Usage:
    processors = [..., activity_id_processor, logical_operation_processor, ...]
"""

from typing import Any

from correlog.domain.services.correlation import get_correlation_state


def activity_id_processor(
    logger: Any, method_name: str, event_dict: dict[str, Any]
) -> dict[str, Any]:
    """Structlog processor to add activity_id to every log entry.

    Nothing is added at the root identity. An activity_id already present
    in the event dict is left untouched.

    Args:
        logger: The logger instance (unused, required by structlog).
        method_name: The logging method name (unused, required by structlog).
        event_dict: The event dictionary to modify.

    Returns:
        The event dictionary with activity_id added.
    """
    activity_id = get_correlation_state().activity_id
    if not activity_id.is_root:
        event_dict.setdefault("activity_id", str(activity_id))
    return event_dict


def logical_operation_processor(
    logger: Any, method_name: str, event_dict: dict[str, Any]
) -> dict[str, Any]:
    """Structlog processor to add the open logical operations.

    Adds logical_operation_stack (outermost first) when at least one
    activity scope is open.
    """
    stack = get_correlation_state().operation_stack
    if stack:
        event_dict.setdefault("logical_operation_stack", list(stack))
    return event_dict
