"""Help command - prints the plugin usage text."""

import click

from helm_oci.cli.help_text import USAGE_TEXT
from helm_oci.cli.output import machine_output


@click.command("help")
def help_cmd() -> None:
    """Show this help message."""
    machine_output(USAGE_TEXT)
