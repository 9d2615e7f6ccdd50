"""Subprocess execution with rich error context."""

import logging
import subprocess
from collections.abc import Sequence
from pathlib import Path
from typing import Any

logger = logging.getLogger(__name__)

SECRET_FLAGS = frozenset({"--password", "-p"})


def display_command(cmd: Sequence[str]) -> str:
    """Render a command for diagnostics with secret flag values masked.

    Examples:
        >>> display_command(["crane", "ls", "r.io/app", "--password", "hunter2"])
        'crane ls r.io/app --password ****'
    """
    parts: list[str] = []
    mask_next = False
    for arg in cmd:
        if mask_next:
            parts.append("****")
            mask_next = False
            continue
        parts.append(str(arg))
        if arg in SECRET_FLAGS:
            mask_next = True
    return " ".join(parts)


class CommandError(RuntimeError):
    """A subprocess failed or could not be started.

    Attributes:
        command: Full argument list that was executed
        returncode: Exit code, or None if the binary could not be started
        stderr: Captured stderr (stripped), empty if none
    """

    def __init__(
        self,
        message: str,
        *,
        command: Sequence[str],
        returncode: int | None,
        stderr: str = "",
    ) -> None:
        super().__init__(message)
        self.command = list(command)
        self.returncode = returncode
        self.stderr = stderr

    @property
    def display_command(self) -> str:
        return display_command(self.command)


def run_subprocess_with_context(
    cmd: Sequence[str],
    operation_context: str,
    cwd: Path | None = None,
    capture_output: bool = True,
    text: bool = True,
    encoding: str = "utf-8",
    check: bool = True,
    **kwargs: Any,
) -> subprocess.CompletedProcess[str]:
    """Execute subprocess with enriched error reporting for the integration layer.

    Wraps subprocess.run() to catch CalledProcessError and FileNotFoundError and
    re-raise them as CommandError with operation context, stderr output, and
    command details. Secrets in the command line are masked in the message.

    Args:
        cmd: Command and arguments to execute
        operation_context: Human-readable description of operation
        cwd: Working directory for command execution
        capture_output: Whether to capture stdout/stderr (default: True)
        text: Whether to decode output as text (default: True)
        encoding: Text encoding to use (default: "utf-8")
        check: Whether to raise on non-zero exit (default: True)
        **kwargs: Additional arguments passed to subprocess.run()

    Returns:
        CompletedProcess instance from subprocess.run()

    Raises:
        CommandError: If the command fails or its binary is not found
    """
    logger.debug("Running: %s", display_command(cmd))
    try:
        return subprocess.run(
            cmd,
            cwd=cwd,
            capture_output=capture_output,
            text=text,
            encoding=encoding,
            check=check,
            **kwargs,
        )

    except subprocess.CalledProcessError as e:
        error_msg = f"Failed to {operation_context}"
        error_msg += f"\nCommand: {display_command(cmd)}"
        error_msg += f"\nExit code: {e.returncode}"

        stderr_stripped = ""
        if e.stderr:
            stderr_text = e.stderr if isinstance(e.stderr, str) else e.stderr.decode("utf-8")
            stderr_stripped = stderr_text.strip()
            if stderr_stripped:
                error_msg += f"\nstderr: {stderr_stripped}"

        raise CommandError(
            error_msg, command=cmd, returncode=e.returncode, stderr=stderr_stripped
        ) from e

    except FileNotFoundError as e:
        error_msg = f"Command not found while trying to {operation_context}: {cmd[0]}"
        error_msg += f"\nFull command: {display_command(cmd)}"
        raise CommandError(error_msg, command=cmd, returncode=None) from e
