"""Registry client backed by the crane binary."""

import os
from pathlib import Path

from helm_oci.core.registry_client.abc import (
    CATALOG,
    LIST_TAGS,
    MANIFEST,
    VERSION,
    RegistryClient,
    build_command,
)
from helm_oci.core.registry_client.types import Credentials, RegistryClientError
from helm_oci.core.subprocess import CommandError, run_subprocess_with_context


def _split_lines(output: str) -> list[str]:
    return [line.strip() for line in output.splitlines() if line.strip()]


class RealRegistryClient(RegistryClient):
    """Registry operations using the crane CLI via subprocess.

    No timeout is set on any invocation; a hung registry hangs the command.

    Example:
        client = RealRegistryClient(Path("/plugins/helm-oci/bin/crane"))
        for repo in client.catalog("registry.example.com", None):
            print(repo)
    """

    def __init__(self, binary_path: Path) -> None:
        self._binary_path = binary_path

    @property
    def binary_path(self) -> Path:
        return self._binary_path

    def _run(
        self,
        operation: str,
        target: str,
        credentials: Credentials | None,
        operation_context: str,
    ) -> str:
        cmd = build_command(self._binary_path, operation, target, credentials)
        try:
            result = run_subprocess_with_context(cmd, operation_context=operation_context)
        except CommandError as e:
            raise RegistryClientError.from_command_error(e) from e
        return result.stdout

    def is_installed(self) -> bool:
        return self._binary_path.is_file() and os.access(self._binary_path, os.X_OK)

    def catalog(self, registry: str, credentials: Credentials | None) -> list[str]:
        output = self._run(CATALOG, registry, credentials, f"list catalog of {registry}")
        return _split_lines(output)

    def tags(self, reference: str, credentials: Credentials | None) -> list[str]:
        output = self._run(LIST_TAGS, reference, credentials, f"list tags of {reference}")
        return _split_lines(output)

    def inspect(self, reference: str, credentials: Credentials | None) -> str:
        return self._run(MANIFEST, reference, credentials, f"fetch manifest of {reference}")

    def version(self) -> str:
        cmd = [str(self._binary_path), VERSION]
        try:
            result = run_subprocess_with_context(cmd, operation_context="probe crane version")
        except CommandError as e:
            raise RegistryClientError.from_command_error(e) from e
        lines = _split_lines(result.stdout)
        if not lines:
            return "unknown"
        return lines[0]
