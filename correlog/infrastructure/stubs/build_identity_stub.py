"""Build identity provider stub for tests."""

from __future__ import annotations

from correlog.application.ports.build_identity import BuildIdentityProviderProtocol


class BuildIdentityProviderStub(BuildIdentityProviderProtocol):
    """Returns a fixed name and version."""

    def __init__(self, name: str = "stub-build", version: str = "1.2.3") -> None:
        self._name = name
        self._version = version

    def current_build_name(self) -> str:
        return self._name

    def current_build_version(self) -> str:
        return self._version
