"""Error boundary handling for CLI entry points.

Catches well-known exceptions at the entry point and displays clean error
messages without stack traces.
"""

import functools
from collections.abc import Callable
from typing import Any, TypeVar

import click

from helm_oci.core.provision.types import ProvisionError
from helm_oci.core.registry_client.types import RegistryClientError

T = TypeVar("T", bound=Callable[..., Any])


def cli_error_boundary(func: T) -> T:
    """Decorator that catches well-known exceptions and displays clean error messages.

    Catches:
        - ProvisionError: Binary could not be installed
        - RegistryClientError: Unexpected registry client failure
        - FileNotFoundError: Missing files/directories
        - PermissionError: Permission denied errors

    All other exceptions bubble up normally with full stack traces.

    Example:
        @click.command()
        @cli_error_boundary
        def my_command():
            ...
    """

    @functools.wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            return func(*args, **kwargs)
        except ProvisionError as e:
            click.echo(click.style("ERROR:", fg="red") + f" {e}", err=True)
            raise SystemExit(1) from None
        except RegistryClientError as e:
            click.echo(click.style("ERROR:", fg="red") + f" {e}", err=True)
            raise SystemExit(1) from None
        except FileNotFoundError as e:
            click.echo(click.style("ERROR:", fg="red") + f" {e}", err=True)
            raise SystemExit(1) from None
        except PermissionError as e:
            click.echo(click.style("ERROR:", fg="red") + f" {e}", err=True)
            raise SystemExit(1) from None

    return wrapper  # type: ignore[return-value]
