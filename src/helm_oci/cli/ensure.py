"""CLI error handling utilities with styled output.

This module provides the Ensure class for asserting invariants in CLI commands
with consistent, user-friendly error messages. Errors go through the context's
feedback so they carry the same "ERROR:" prefix as every other diagnostic.
"""

from typing import TYPE_CHECKING, TypeVar

from helm_oci.cli.output import user_output

if TYPE_CHECKING:
    from helm_oci.core.context import HelmOciContext

T = TypeVar("T")


class Ensure:
    """Helper class for asserting invariants with consistent error handling."""

    @staticmethod
    def argument_given(
        ctx: "HelmOciContext", value: T | None, error_message: str, usage: str
    ) -> T:
        """Ensure a positional argument was supplied, otherwise show usage and exit.

        Empty strings count as missing.

        Args:
            ctx: Application context
            value: Argument value as parsed by click
            error_message: Error message, e.g. "Registry URL is required"
            usage: Usage line(s) for the command, printed after the error

        Returns:
            The value unchanged if present (with narrowed type T)

        Raises:
            SystemExit: If value is None or empty (with exit code 1)

        Example:
            >>> registry = Ensure.argument_given(
            ...     ctx, registry, "Registry URL is required", LIST_USAGE
            ... )
        """
        if value is None or value == "":
            ctx.feedback.error(error_message)
            user_output(usage)
            raise SystemExit(1)
        return value

    @staticmethod
    def registry_client_installed(ctx: "HelmOciContext") -> None:
        """Ensure the crane binary is installed in the plugin directory.

        This is a LBYL check run before any registry operation so the operator
        gets an install hint instead of a "command not found" trace.

        Raises:
            SystemExit: If the binary is missing (with exit code 1)
        """
        if not ctx.registry_client.is_installed():
            ctx.feedback.error(f"Crane binary not found at {ctx.config.binary_path}")
            ctx.feedback.info("Run 'helm plugin update oci' to install crane")
            raise SystemExit(1)
