"""Domain errors for correlog.

All exceptions inherit from CorrelogError.
"""

from correlog.domain.errors.argument import InvalidArgumentError

__all__: list[str] = ["InvalidArgumentError"]
