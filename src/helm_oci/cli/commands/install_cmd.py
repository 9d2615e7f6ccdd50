"""Install command - provisions the crane binary for the plugin.

Run by Helm's install and update hooks (see plugin.yaml). Not part of the
`helm oci` command set.
"""

import click

from helm_oci.cli.error_boundary import cli_error_boundary
from helm_oci.core.config import PluginConfig
from helm_oci.core.context import configure_logging
from helm_oci.core.feedback import InteractiveFeedback
from helm_oci.core.provision.provisioner import BinaryProvisioner
from helm_oci.core.provision.releases import GitHubReleases
from helm_oci.core.shell import RealShell


def create_provisioner(config: PluginConfig) -> BinaryProvisioner:
    """Wire the provisioner with real shell, release source and feedback."""
    return BinaryProvisioner(
        config=config,
        shell=RealShell(),
        releases=GitHubReleases(config.release_api_url),
        feedback=InteractiveFeedback(color=config.color),
    )


@click.command("install", context_settings=dict(help_option_names=["-h", "--help"]))
@click.pass_context
@cli_error_boundary
def install_cmd(ctx: click.Context) -> None:
    """Check for crane and install it into the plugin directory if missing."""
    provisioner = ctx.obj
    if provisioner is None:
        config = PluginConfig.from_env()
        configure_logging(config)
        provisioner = create_provisioner(config)

    with provisioner:
        feedback = provisioner.feedback
        feedback.info("Helm OCI Plugin - Checking/Installing crane dependency")
        provisioner.ensure_binary()
        feedback.success("Crane setup completed")
