"""Search command implementation.

Two modes, chosen by resolve_search_target():
- registry/repository with no pattern: show tags of that one repository
- registry [pattern]: list the catalog, filter it, show tags per repository
"""

import click

from helm_oci.cli.ensure import Ensure
from helm_oci.cli.error_boundary import cli_error_boundary
from helm_oci.cli.group import fail_usage
from helm_oci.cli.help_text import SEARCH_USAGE
from helm_oci.cli.options import credential_options
from helm_oci.cli.output import machine_output
from helm_oci.cli.rendering import format_row, print_rows, print_table_header
from helm_oci.core.context import HelmOciContext
from helm_oci.core.reference import SearchTarget, resolve_search_target
from helm_oci.core.registry_client.types import Credentials, RegistryClientError
from helm_oci.core.search import (
    compile_pattern,
    filter_repositories,
    iter_rows,
    summarize_tags,
)


def _suggest_authentication(ctx: HelmOciContext, target: str, error: RegistryClientError) -> None:
    ctx.feedback.error(f"Command failed: {error.display_command}")
    ctx.feedback.error("This registry may require authentication. Try:")
    ctx.feedback.error(f"  helm oci search {target} --username <username> --password <password>")


def _search_repository(
    ctx: HelmOciContext, target: SearchTarget, credentials: Credentials | None
) -> None:
    repository = target.repository or ""
    reference = target.repository_reference
    ctx.feedback.info(f"Searching for specific repository: {repository}")

    try:
        tags = ctx.registry_client.tags(reference, credentials)
    except RegistryClientError as e:
        ctx.feedback.error(f"Failed to get tags for repository: {reference}")
        _suggest_authentication(ctx, reference, e)
        raise SystemExit(1) from None

    print_table_header()
    machine_output(format_row(repository, summarize_tags(tags)))
    ctx.feedback.success("Search completed")


def _search_catalog(
    ctx: HelmOciContext, target: SearchTarget, credentials: Credentials | None
) -> None:
    try:
        compile_pattern(target.pattern)
    except ValueError as e:
        fail_usage(str(e))

    try:
        repositories = ctx.registry_client.catalog(target.registry, credentials)
    except RegistryClientError as e:
        ctx.feedback.error("Failed to get repository list from registry")
        if e.stderr:
            ctx.feedback.error(e.stderr)
        _suggest_authentication(ctx, target.registry, e)
        ctx.feedback.error(
            "Or ensure your Docker config (~/.docker/config.json) has credentials for "
            f"{target.registry}"
        )
        raise SystemExit(1) from None

    matches = filter_repositories(repositories, target.pattern)

    if not matches:
        ctx.feedback.warn(f"No repositories found matching pattern: {target.pattern or '*'}")
        return

    ctx.feedback.info(f"Found {len(matches)} repositories")
    print_table_header()
    print_rows(iter_rows(ctx.registry_client, target.registry, matches, credentials))
    ctx.feedback.success("Search completed")


@click.command("search")
@click.argument("registry", required=False)
@click.argument("pattern", required=False)
@credential_options
@click.pass_obj
@cli_error_boundary
def search_cmd(
    ctx: HelmOciContext,
    registry: str | None,
    pattern: str | None,
    username: str | None,
    password: str | None,
) -> None:
    """Search for Helm charts in an OCI registry.

    If REGISTRY contains a path (registry/repo), shows tags for that
    repository. Otherwise lists all repositories, optionally filtered by the
    PATTERN regular expression.
    """
    registry = Ensure.argument_given(ctx, registry, "Registry URL is required", SEARCH_USAGE)
    Ensure.registry_client_installed(ctx)

    target = resolve_search_target(registry, pattern)
    credentials = Credentials.from_options(username, password)

    if target.is_specific_repository:
        ctx.feedback.info(
            f"Parsed registry: {target.registry}, specific repository: {target.repository}"
        )
        _search_repository(ctx, target, credentials)
        return

    ctx.feedback.info(f"Searching for Helm charts in registry: {target.registry}")
    _search_catalog(ctx, target, credentials)
