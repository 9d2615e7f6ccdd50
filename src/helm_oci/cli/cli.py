import click

from helm_oci.cli.commands.help_cmd import help_cmd
from helm_oci.cli.commands.inspect_cmd import inspect_cmd
from helm_oci.cli.commands.install_cmd import install_cmd
from helm_oci.cli.commands.list_cmd import list_cmd
from helm_oci.cli.commands.search_cmd import search_cmd
from helm_oci.cli.group import HelmOciGroup
from helm_oci.cli.help_text import USAGE_TEXT
from helm_oci.cli.output import machine_output
from helm_oci.core.context import HelmOciContext, create_context
from helm_oci.core.helm.abc import SUPPORTED_HELM_VERSIONS

CONTEXT_SETTINGS = dict(help_option_names=["-h", "--help"])


def report_helm_version(ctx: HelmOciContext) -> None:
    """Note the Helm host version; an unknown version is a warning, never an error."""
    helm_version = ctx.helm.get_version()
    if helm_version in SUPPORTED_HELM_VERSIONS:
        ctx.feedback.info(f"Detected Helm {helm_version}")
    else:
        ctx.feedback.warn(
            "Helm version detection failed or unsupported version. Assuming v3 compatibility."
        )


@click.group(cls=HelmOciGroup, context_settings=CONTEXT_SETTINGS, invoke_without_command=True)
@click.version_option(package_name="helm-oci")
@click.pass_context
def cli(ctx: click.Context) -> None:
    """List, search and inspect Helm charts in OCI registries."""
    # Only create context if not already provided (e.g., by tests)
    if ctx.obj is None:
        ctx.obj = create_context()

    report_helm_version(ctx.obj)

    if ctx.invoked_subcommand is None:
        machine_output(USAGE_TEXT)


cli.add_command(help_cmd)
cli.add_command(inspect_cmd)
cli.add_command(list_cmd)
cli.add_command(search_cmd)


def main() -> None:
    """CLI entry point used by the `helm-oci` console script."""
    cli()


def install_main() -> None:
    """CLI entry point used by the `helm-oci-install` console script."""
    install_cmd()
