"""Build identity from installed package metadata."""

from __future__ import annotations

import sys
from functools import cached_property
from importlib import metadata

from correlog.application.ports.build_identity import (
    UNKNOWN_VERSION,
    BuildIdentityProviderProtocol,
)
from correlog.domain.errors.argument import InvalidArgumentError


class PackageBuildIdentityProvider(BuildIdentityProviderProtocol):
    """Reads name and version for a top-level import package.

    The distribution providing the package is looked up in the installed
    metadata. When the package is not installed as a distribution (e.g.
    run from a source checkout), the __version__ of an already imported
    module of that name is used, and "0.0.0" when there is none. Nothing
    is imported on behalf of the caller; source names need not be module
    names.
    """

    def __init__(self, package_name: str) -> None:
        if not package_name:
            raise InvalidArgumentError("package_name")
        self._package_name = package_name

    @cached_property
    def _distribution_name(self) -> str | None:
        distributions = metadata.packages_distributions().get(self._package_name)
        return distributions[0] if distributions else None

    def current_build_name(self) -> str:
        return self._distribution_name or self._package_name

    def current_build_version(self) -> str:
        if self._distribution_name is not None:
            try:
                return metadata.version(self._distribution_name)
            except metadata.PackageNotFoundError:
                pass
        module = sys.modules.get(self._package_name)
        return str(getattr(module, "__version__", UNKNOWN_VERSION))
