"""Registry client interface.

All registry protocol work is delegated to an external binary (crane). This
module defines the narrow interface the commands depend on, following the
ABC-based dependency injection used for every external tool in the package.
Real implementations run the binary via subprocess. The fake is pure
in-memory for unit tests without a registry or a crane binary.
"""

from abc import ABC, abstractmethod
from pathlib import Path

from helm_oci.core.registry_client.types import Credentials

CATALOG = "catalog"
LIST_TAGS = "ls"
MANIFEST = "manifest"
VERSION = "version"


def build_command(
    binary: Path | str,
    operation: str,
    target: str,
    credentials: Credentials | None,
) -> list[str]:
    """Build the argument list for one registry client invocation.

    Credentials are appended as --username/--password only when present.

    Examples:
        >>> build_command("crane", "ls", "r.io/app", None)
        ['crane', 'ls', 'r.io/app']
        >>> build_command("crane", "catalog", "r.io", Credentials("u", "p"))
        ['crane', 'catalog', 'r.io', '--username', 'u', '--password', 'p']
    """
    cmd = [str(binary), operation, target]
    if credentials is not None:
        cmd.extend(credentials.as_flags())
    return cmd


class RegistryClient(ABC):
    """Abstract interface for registry operations.

    Every method raises RegistryClientError when the underlying tool exits
    non-zero. Nothing is retried or cached.
    """

    @abstractmethod
    def is_installed(self) -> bool:
        """Check whether the client binary is present and executable.

        Returns:
            True if the binary exists at its configured location
        """

    @abstractmethod
    def catalog(self, registry: str, credentials: Credentials | None) -> list[str]:
        """List repository names hosted by a registry.

        Args:
            registry: Registry host, e.g. "registry.example.com:5000"
            credentials: Optional credentials forwarded to the tool

        Returns:
            Repository names in the order the tool reported them

        Raises:
            RegistryClientError: If the catalog cannot be listed
        """

    @abstractmethod
    def tags(self, reference: str, credentials: Credentials | None) -> list[str]:
        """List tags of one repository.

        Args:
            reference: "registry/repository" path
            credentials: Optional credentials forwarded to the tool

        Returns:
            Tags in the order the tool reported them (not sorted)

        Raises:
            RegistryClientError: If the tags cannot be listed
        """

    @abstractmethod
    def inspect(self, reference: str, credentials: Credentials | None) -> str:
        """Fetch the manifest of a chart reference.

        Args:
            reference: "registry/repository:tag" chart reference
            credentials: Optional credentials forwarded to the tool

        Returns:
            Raw manifest document as printed by the tool

        Raises:
            RegistryClientError: If the manifest cannot be fetched
        """

    @abstractmethod
    def version(self) -> str:
        """Probe the client version.

        Returns:
            Version string reported by the tool

        Raises:
            RegistryClientError: If the tool does not answer the probe
        """
