"""
Value objects for correlog.

Value objects are immutable types defined by their attributes rather
than identity. Two value objects with the same attributes are equal.
"""

from correlog.domain.value_objects.activity_identity import ActivityIdentity
from correlog.domain.value_objects.event_type import EventType, SourceLevel

__all__: list[str] = ["ActivityIdentity", "EventType", "SourceLevel"]
