"""Output utilities for CLI commands with clear intent.

user_output() is for diagnostics meant for the operator and goes to stderr.
machine_output() is for data (tables, raw registry output) and goes to stdout,
so piping a command never captures log noise.
"""

from typing import Any

import click


def user_output(message: Any = "", nl: bool = True) -> None:
    """Write a diagnostic message to stderr."""
    click.echo(message, err=True, nl=nl)


def machine_output(message: Any = "", nl: bool = True) -> None:
    """Write command data to stdout."""
    click.echo(message, nl=nl)
