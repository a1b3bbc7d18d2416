"""Build identity provider port definition.

Supplies the name and version used by Logger.log_build_information.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

# Version reported when no build metadata is available
UNKNOWN_VERSION = "0.0.0"


class BuildIdentityProviderProtocol(ABC):
    """Abstract protocol for build metadata lookup."""

    @abstractmethod
    def current_build_name(self) -> str:
        """Name of the running build (distribution or package name)."""
        ...

    @abstractmethod
    def current_build_version(self) -> str:
        """Version string of the running build."""
        ...
