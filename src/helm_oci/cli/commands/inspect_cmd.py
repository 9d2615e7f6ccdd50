"""Inspect command implementation - prints the manifest of a chart."""

import click

from helm_oci.cli.ensure import Ensure
from helm_oci.cli.error_boundary import cli_error_boundary
from helm_oci.cli.help_text import INSPECT_USAGE
from helm_oci.cli.options import credential_options
from helm_oci.cli.output import machine_output
from helm_oci.core.context import HelmOciContext
from helm_oci.core.registry_client.types import Credentials, RegistryClientError


@click.command("inspect")
@click.argument("chart_ref", metavar="CHART_REF", required=False)
@click.argument("extra", required=False)
@credential_options
@click.pass_obj
@cli_error_boundary
def inspect_cmd(
    ctx: HelmOciContext,
    chart_ref: str | None,
    extra: str | None,
    username: str | None,
    password: str | None,
) -> None:
    """Show the manifest of a chart reference (registry/repository:tag).

    A second positional is accepted and ignored.
    """
    chart_ref = Ensure.argument_given(ctx, chart_ref, "Chart reference is required", INSPECT_USAGE)
    Ensure.registry_client_installed(ctx)

    ctx.feedback.info(f"Inspecting chart: {chart_ref}")
    credentials = Credentials.from_options(username, password)

    try:
        manifest = ctx.registry_client.inspect(chart_ref, credentials)
    except RegistryClientError as e:
        ctx.feedback.error(f"Failed to inspect chart: {chart_ref}")
        ctx.feedback.error(f"Command failed: {e.display_command}")
        if e.stderr:
            ctx.feedback.error(e.stderr)
        raise SystemExit(1) from None

    machine_output(manifest.rstrip("\n"))
    ctx.feedback.success("Chart inspection completed")
