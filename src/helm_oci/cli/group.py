"""Click group that renders the plugin usage text and normalizes usage errors."""

from typing import Any, NoReturn

import click

from helm_oci.cli.help_text import USAGE_TEXT
from helm_oci.cli.output import user_output


class UsageFailure(click.ClickException):
    """Usage error reported with the full usage text and exit code 1.

    Click reports usage errors with exit code 2; the plugin contract is 1 for
    every failure.
    """

    exit_code = 1

    def show(self, file: Any = None) -> None:
        user_output(click.style("ERROR:", fg="red") + f" {self.format_message()}")
        user_output(USAGE_TEXT)


def fail_usage(message: str) -> NoReturn:
    raise UsageFailure(message)


class HelmOciGroup(click.Group):
    """Click Group for the plugin's fixed command set.

    - Help output (`-h`, `--help`) is the static plugin usage text
    - An unknown leading token is reported as "Unknown command"
    - Any click usage error (unknown option, extra argument, missing option
      value) exits 1 instead of 2
    """

    def format_help(self, ctx: click.Context, formatter: click.HelpFormatter) -> None:
        formatter.write(USAGE_TEXT)

    def resolve_command(
        self, ctx: click.Context, args: list[str]
    ) -> tuple[str | None, click.Command | None, list[str]]:
        cmd_name = args[0]
        if self.get_command(ctx, cmd_name) is None:
            fail_usage(f"Unknown command: {cmd_name}")
        return super().resolve_command(ctx, args)

    def parse_args(self, ctx: click.Context, args: list[str]) -> list[str]:
        try:
            return super().parse_args(ctx, args)
        except click.UsageError as e:
            raise UsageFailure(e.format_message()) from e

    def invoke(self, ctx: click.Context) -> Any:
        try:
            return super().invoke(ctx)
        except click.UsageError as e:
            raise UsageFailure(e.format_message()) from e
