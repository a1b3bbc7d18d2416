"""Logging configuration.

Defines output environment, source thresholds, the stderr text writer and its
message size limit, and metrics collection, with environment variable
overrides.

Environment Variables:
- CORRELOG_ENVIRONMENT: "production" (JSON) or "development" (console) (default: production)
- CORRELOG_LEVEL: Default source level for new sources (default: warning)
- CORRELOG_SOURCE_LEVELS: Per-source overrides, e.g. "billing=verbose,db=off"
- CORRELOG_MAX_MESSAGE_SIZE: Max text message size in characters (default: 30720, min: 256, max: 1048576)
- CORRELOG_METRICS_ENABLED: Attach the Prometheus writer to new sources (default: false)
- CORRELOG_STREAM_ENABLED: Attach a stderr text writer to new sources (default: false)
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType

from correlog.domain.errors.argument import InvalidArgumentError
from correlog.domain.value_objects.event_type import SourceLevel

ENVIRONMENTS = ("production", "development")
DEFAULT_ENVIRONMENT = "production"

DEFAULT_SOURCE_LEVEL = SourceLevel.WARNING

# 30 KiB, the largest message the classic OS event log accepts
DEFAULT_MAX_MESSAGE_SIZE = 30 * 1024
MIN_MAX_MESSAGE_SIZE = 256
MAX_MAX_MESSAGE_SIZE = 1024 * 1024

_TRUE_VALUES = frozenset({"1", "true", "yes", "on"})


def _get_int_env(key: str, default: int) -> int:
    """Get integer environment variable with default.

    Args:
        key: Environment variable name.
        default: Default value if not set or invalid.

    Returns:
        Parsed integer value or default.
    """
    value = os.environ.get(key)
    if value is None:
        return default
    try:
        return int(value)
    except ValueError:
        return default


def _get_bool_env(key: str, default: bool) -> bool:
    value = os.environ.get(key)
    if value is None:
        return default
    return value.strip().lower() in _TRUE_VALUES


def _get_level_env(key: str, default: SourceLevel) -> SourceLevel:
    value = os.environ.get(key)
    if not value:
        return default
    try:
        return SourceLevel.parse(value)
    except InvalidArgumentError:
        return default


def parse_source_levels(text: str) -> dict[str, SourceLevel]:
    """Parse "name=level,name=level" into a mapping.

    Blank entries are ignored.

    Raises:
        InvalidArgumentError: On an entry without "=", an empty name, or an
            unknown level.
    """
    levels: dict[str, SourceLevel] = {}
    for entry in text.split(","):
        entry = entry.strip()
        if not entry:
            continue
        name, sep, level = entry.partition("=")
        name = name.strip()
        if not sep or not name:
            raise InvalidArgumentError(
                "source_levels", f"invalid source level entry '{entry}'"
            )
        levels[name] = SourceLevel.parse(level)
    return levels


@dataclass(frozen=True)
class LoggingConfig:
    """Configuration for sources, writers and structlog output.

    Attributes:
        environment: "production" for JSON output, "development" for console.
        default_level: Threshold given to newly created sources.
        source_levels: Per-source threshold overrides keyed by source name.
        max_message_size: The stderr text writer truncates messages beyond
                          this size.
                          Default: 30720. Minimum: 256. Maximum: 1048576.
        metrics_enabled: Whether new sources get the Prometheus writer.
        stream_enabled: Whether new sources get a stderr text writer.
    """

    environment: str = DEFAULT_ENVIRONMENT
    default_level: SourceLevel = DEFAULT_SOURCE_LEVEL
    source_levels: Mapping[str, SourceLevel] = field(
        default_factory=lambda: MappingProxyType({})
    )
    max_message_size: int = DEFAULT_MAX_MESSAGE_SIZE
    metrics_enabled: bool = False
    stream_enabled: bool = False

    def __post_init__(self) -> None:
        """Validate configuration values."""
        if self.environment not in ENVIRONMENTS:
            raise ValueError(
                f"environment must be one of {ENVIRONMENTS}, got {self.environment!r}"
            )
        if not MIN_MAX_MESSAGE_SIZE <= self.max_message_size <= MAX_MAX_MESSAGE_SIZE:
            raise ValueError(
                f"max_message_size must be between {MIN_MAX_MESSAGE_SIZE} "
                f"and {MAX_MAX_MESSAGE_SIZE}, got {self.max_message_size}"
            )
        # Freeze a caller-supplied dict
        if not isinstance(self.source_levels, MappingProxyType):
            object.__setattr__(
                self, "source_levels", MappingProxyType(dict(self.source_levels))
            )

    def level_for(self, source_name: str) -> SourceLevel:
        """Threshold for a source: its override, else the default level."""
        return self.source_levels.get(source_name, self.default_level)

    @property
    def is_development(self) -> bool:
        return self.environment == "development"

    @classmethod
    def from_environment(cls) -> LoggingConfig:
        """Create config from environment variables with defaults.

        Invalid values fall back to defaults; the message size is clamped
        to its valid range.

        Returns:
            LoggingConfig with values from environment or defaults.
        """
        environment = os.environ.get("CORRELOG_ENVIRONMENT", DEFAULT_ENVIRONMENT)
        environment = environment.strip().lower()
        if environment not in ENVIRONMENTS:
            environment = DEFAULT_ENVIRONMENT

        default_level = _get_level_env("CORRELOG_LEVEL", DEFAULT_SOURCE_LEVEL)

        try:
            source_levels = parse_source_levels(
                os.environ.get("CORRELOG_SOURCE_LEVELS", "")
            )
        except InvalidArgumentError:
            source_levels = {}

        max_message_size = _get_int_env(
            "CORRELOG_MAX_MESSAGE_SIZE",
            DEFAULT_MAX_MESSAGE_SIZE,
        )
        # Clamp to valid range
        max_message_size = max(
            MIN_MAX_MESSAGE_SIZE,
            min(max_message_size, MAX_MAX_MESSAGE_SIZE),
        )

        return cls(
            environment=environment,
            default_level=default_level,
            source_levels=source_levels,
            max_message_size=max_message_size,
            metrics_enabled=_get_bool_env("CORRELOG_METRICS_ENABLED", False),
            stream_enabled=_get_bool_env("CORRELOG_STREAM_ENABLED", False),
        )


# Default production config
DEFAULT_LOGGING_CONFIG = LoggingConfig()

# Testing config: everything recorded, console output
TEST_LOGGING_CONFIG = LoggingConfig(
    environment="development",
    default_level=SourceLevel.ALL,
)
