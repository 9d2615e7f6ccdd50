"""Fake registry client for testing without a registry or a crane binary."""

from typing import NoReturn

from helm_oci.core.registry_client.abc import (
    CATALOG,
    LIST_TAGS,
    MANIFEST,
    VERSION,
    RegistryClient,
    build_command,
)
from helm_oci.core.registry_client.types import Credentials, RegistryClientError


class FakeRegistryClient(RegistryClient):
    """In-memory fake implementation of registry operations.

    Constructor Injection:
    - All registry contents are provided via constructor parameters
    - Anything not configured behaves like an unreachable or unknown target
      and raises RegistryClientError, the way crane exits non-zero

    Examples:
        >>> client = FakeRegistryClient(
        ...     catalogs={"r.io": ["nginx", "redis"]},
        ...     tags={"r.io/nginx": ["1.0.0", "1.1.0"]},
        ... )
        >>> client.catalog("r.io", None)
        ['nginx', 'redis']
    """

    def __init__(
        self,
        *,
        catalogs: dict[str, list[str]] | None = None,
        tags: dict[str, list[str]] | None = None,
        manifests: dict[str, str] | None = None,
        installed: bool = True,
        version_string: str = "v0.19.0",
        binary: str = "crane",
    ) -> None:
        """Initialize fake with predetermined registry contents.

        Args:
            catalogs: Mapping of registry host to repository names
            tags: Mapping of "registry/repository" to its tags
            manifests: Mapping of chart reference to raw manifest text
            installed: Value returned from is_installed()
            version_string: Value returned from version()
            binary: Binary name used when rendering failed commands
        """
        self._catalogs = catalogs or {}
        self._tags = tags or {}
        self._manifests = manifests or {}
        self._installed = installed
        self._version_string = version_string
        self._binary = binary
        self._calls: list[tuple[str, str, Credentials | None]] = []

    @property
    def calls(self) -> list[tuple[str, str, Credentials | None]]:
        """Get the list of (operation, target, credentials) calls that were made.

        This property is for test assertions only.
        """
        return self._calls.copy()

    def _fail(self, operation: str, target: str, credentials: Credentials | None) -> NoReturn:
        cmd = build_command(self._binary, operation, target, credentials)
        raise RegistryClientError(
            f"Failed to {operation} {target}",
            command=cmd,
            returncode=1,
            stderr="UNAUTHORIZED: authentication required",
        )

    def is_installed(self) -> bool:
        return self._installed

    def catalog(self, registry: str, credentials: Credentials | None) -> list[str]:
        self._calls.append((CATALOG, registry, credentials))
        if registry not in self._catalogs:
            self._fail(CATALOG, registry, credentials)
        return list(self._catalogs[registry])

    def tags(self, reference: str, credentials: Credentials | None) -> list[str]:
        self._calls.append((LIST_TAGS, reference, credentials))
        if reference not in self._tags:
            self._fail(LIST_TAGS, reference, credentials)
        return list(self._tags[reference])

    def inspect(self, reference: str, credentials: Credentials | None) -> str:
        self._calls.append((MANIFEST, reference, credentials))
        if reference not in self._manifests:
            self._fail(MANIFEST, reference, credentials)
        return self._manifests[reference]

    def version(self) -> str:
        self._calls.append((VERSION, "", None))
        if not self._installed:
            self._fail(VERSION, "", None)
        return self._version_string
