"""Operator-facing status messages with consistent prefixes."""

from abc import ABC, abstractmethod

import click

from helm_oci.cli.output import user_output


class UserFeedback(ABC):
    """Status logging for commands.

    Every message is a single line on stderr with a level prefix, so table
    output on stdout stays clean:

        INFO: Listing repositories in registry: registry.example.com
        WARN: No repositories found matching pattern: nginx
        ERROR: Failed to list repositories
        SUCCESS: Successfully listed repositories

    Usage:
        ctx.feedback.info("Searching for Helm charts in registry: ...")
        if not rows:
            ctx.feedback.warn("No repositories found ...")
    """

    @abstractmethod
    def info(self, message: str) -> None:
        """Show informational message."""

    @abstractmethod
    def warn(self, message: str) -> None:
        """Show warning message."""

    @abstractmethod
    def error(self, message: str) -> None:
        """Show error message."""

    @abstractmethod
    def success(self, message: str) -> None:
        """Show success message."""


class InteractiveFeedback(UserFeedback):
    """Feedback written to stderr, with colored prefixes unless disabled."""

    def __init__(self, *, color: bool = True) -> None:
        self._color = color

    def _prefix(self, label: str, fg: str, bold: bool = False) -> str:
        if not self._color:
            return f"{label}:"
        return click.style(f"{label}:", fg=fg, bold=bold)

    def info(self, message: str) -> None:
        user_output(f"{self._prefix('INFO', 'blue')} {message}")

    def warn(self, message: str) -> None:
        user_output(f"{self._prefix('WARN', 'yellow', bold=True)} {message}")

    def error(self, message: str) -> None:
        user_output(f"{self._prefix('ERROR', 'red')} {message}")

    def success(self, message: str) -> None:
        user_output(f"{self._prefix('SUCCESS', 'green')} {message}")
