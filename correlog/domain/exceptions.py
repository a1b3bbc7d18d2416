"""Base exception classes for the correlog domain layer."""


class CorrelogError(Exception):
    """Base exception for all correlog errors.

    All library-specific exceptions MUST inherit from this class so callers
    can catch correlog failures without catching sink or writer failures,
    which always propagate unchanged.
    """

    def __init__(self, message: str = "") -> None:
        """Initialize the exception with an optional message.

        Args:
            message: Human-readable error description.
        """
        super().__init__(message)
