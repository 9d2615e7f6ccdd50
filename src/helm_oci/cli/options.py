"""Shared click options."""

from collections.abc import Callable
from typing import Any

import click

F = Callable[..., Any]


def credential_options(func: F) -> F:
    """Add --username/--password to a registry command.

    Both are optional and passed through verbatim; they are only forwarded
    to crane when both are non-empty.
    """
    func = click.option(
        "--password",
        default=None,
        metavar="<password>",
        help="Password for registry authentication",
    )(func)
    func = click.option(
        "--username",
        default=None,
        metavar="<username>",
        help="Username for registry authentication",
    )(func)
    return func
