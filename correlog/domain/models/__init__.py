"""Domain models for correlog."""

from correlog.domain.models.correlation_state import CorrelationState
from correlog.domain.models.trace_event import TraceEvent

__all__: list[str] = ["CorrelationState", "TraceEvent"]
