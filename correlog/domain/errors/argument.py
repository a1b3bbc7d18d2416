"""Argument validation errors."""

from correlog.domain.exceptions import CorrelogError


class InvalidArgumentError(CorrelogError, ValueError):
    """Raised when a required argument is missing or empty.

    Raised before any state change: a scope opened without a sink, a logger
    constructed without a sink, a registry lookup with an empty name, or an
    unparseable source level.

    Example:
        raise InvalidArgumentError("sink is required")
    """

    def __init__(self, argument: str, message: str = "") -> None:
        """Initialize with the offending argument name.

        Args:
            argument: Name of the invalid argument.
            message: Optional description; defaults to "<argument> is required".
        """
        self.argument = argument
        super().__init__(message or f"{argument} is required")
