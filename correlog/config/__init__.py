"""Configuration module for correlog.

Available Configurations:
- LoggingConfig: Output environment, source thresholds, message size, metrics
"""

from correlog.config.logging_config import (
    DEFAULT_LOGGING_CONFIG,
    TEST_LOGGING_CONFIG,
    LoggingConfig,
)

__all__ = [
    "LoggingConfig",
    "DEFAULT_LOGGING_CONFIG",
    "TEST_LOGGING_CONFIG",
]
