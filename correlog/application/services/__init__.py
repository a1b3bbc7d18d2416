"""Application services for correlog."""

from correlog.application.services.activity_scope import (
    NULL_SCOPE,
    ActivityScope,
    ActivityTracker,
    NullActivityScope,
)
from correlog.application.services.logger import Logger, SourceNameBuildIdentity

__all__: list[str] = [
    "NULL_SCOPE",
    "ActivityScope",
    "ActivityTracker",
    "Logger",
    "NullActivityScope",
    "SourceNameBuildIdentity",
]
