"""List command implementation - prints the catalog of a registry."""

import click

from helm_oci.cli.ensure import Ensure
from helm_oci.cli.error_boundary import cli_error_boundary
from helm_oci.cli.help_text import LIST_USAGE
from helm_oci.cli.options import credential_options
from helm_oci.cli.output import machine_output
from helm_oci.core.context import HelmOciContext
from helm_oci.core.registry_client.types import Credentials, RegistryClientError


@click.command("list")
@click.argument("registry", required=False)
@click.argument("extra", required=False)
@credential_options
@click.pass_obj
@cli_error_boundary
def list_cmd(
    ctx: HelmOciContext,
    registry: str | None,
    extra: str | None,
    username: str | None,
    password: str | None,
) -> None:
    """List all repositories in the specified OCI registry.

    A second positional is accepted and ignored; a third is a usage error.
    """
    registry = Ensure.argument_given(ctx, registry, "Registry URL is required", LIST_USAGE)
    Ensure.registry_client_installed(ctx)

    ctx.feedback.info(f"Listing repositories in registry: {registry}")
    credentials = Credentials.from_options(username, password)

    try:
        repositories = ctx.registry_client.catalog(registry, credentials)
    except RegistryClientError as e:
        ctx.feedback.error("Failed to list repositories")
        if e.stderr:
            ctx.feedback.error(e.stderr)
        raise SystemExit(1) from None

    for repo in repositories:
        machine_output(repo)
    ctx.feedback.success("Successfully listed repositories")
