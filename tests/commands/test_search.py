"""Tests for the search command."""

from click.testing import CliRunner

from helm_oci.cli.cli import cli
from helm_oci.cli.rendering import format_row, table_header
from helm_oci.core.context import HelmOciContext
from helm_oci.core.registry_client.fake import FakeRegistryClient
from helm_oci.core.registry_client.types import Credentials

REGISTRY = "registry.example.com"


def _table(*rows: tuple[str, str]) -> list[str]:
    return table_header() + [format_row(repo, tags) for repo, tags in rows]


def test_search_filters_catalog_and_shows_tags() -> None:
    client = FakeRegistryClient(
        catalogs={REGISTRY: ["charts/nginx", "charts/redis", "charts/nginx-ingress"]},
        tags={
            f"{REGISTRY}/charts/nginx": ["1.0.0", "1.1.0", "1.2.0", "2.0.0"],
            f"{REGISTRY}/charts/nginx-ingress": ["4.0.0"],
        },
    )
    ctx = HelmOciContext.for_test(registry_client=client)

    result = CliRunner().invoke(cli, ["search", REGISTRY, "nginx"], obj=ctx)

    assert result.exit_code == 0, result.output
    assert result.stdout.splitlines() == _table(
        ("charts/nginx", "1.0.0,1.1.0,1.2.0"),
        ("charts/nginx-ingress", "4.0.0"),
    )
    assert f"INFO: Searching for Helm charts in registry: {REGISTRY}" in result.stderr
    assert "INFO: Found 2 repositories" in result.stderr
    assert "SUCCESS: Search completed" in result.stderr
    assert client.calls == [
        ("catalog", REGISTRY, None),
        ("ls", f"{REGISTRY}/charts/nginx", None),
        ("ls", f"{REGISTRY}/charts/nginx-ingress", None),
    ]


def test_search_without_pattern_shows_every_repository() -> None:
    client = FakeRegistryClient(
        catalogs={REGISTRY: ["a", "b"]},
        tags={f"{REGISTRY}/a": ["1"], f"{REGISTRY}/b": []},
    )
    ctx = HelmOciContext.for_test(registry_client=client)

    result = CliRunner().invoke(cli, ["search", REGISTRY], obj=ctx)

    assert result.exit_code == 0
    assert result.stdout.splitlines() == _table(("a", "1"), ("b", ""))


def test_search_marks_unreadable_repositories_na() -> None:
    client = FakeRegistryClient(
        catalogs={REGISTRY: ["private", "public"]},
        tags={f"{REGISTRY}/public": ["0.1.0"]},
    )
    ctx = HelmOciContext.for_test(registry_client=client)

    result = CliRunner().invoke(cli, ["search", REGISTRY], obj=ctx)

    assert result.exit_code == 0
    assert result.stdout.splitlines() == _table(("private", "N/A"), ("public", "0.1.0"))


def test_search_no_matches_warns_and_succeeds() -> None:
    client = FakeRegistryClient(catalogs={REGISTRY: ["charts/redis"]})
    ctx = HelmOciContext.for_test(registry_client=client)

    result = CliRunner().invoke(cli, ["search", REGISTRY, "nginx"], obj=ctx)

    assert result.exit_code == 0
    assert result.stdout == ""
    assert "WARN: No repositories found matching pattern: nginx" in result.stderr
    assert client.calls == [("catalog", REGISTRY, None)]


def test_search_empty_catalog_reports_wildcard() -> None:
    ctx = HelmOciContext.for_test(registry_client=FakeRegistryClient(catalogs={REGISTRY: []}))

    result = CliRunner().invoke(cli, ["search", REGISTRY], obj=ctx)

    assert result.exit_code == 0
    assert "WARN: No repositories found matching pattern: *" in result.stderr


def test_search_specific_repository_lists_its_tags() -> None:
    client = FakeRegistryClient(tags={f"{REGISTRY}/charts/nginx": ["2.0.0", "1.0.0"]})
    ctx = HelmOciContext.for_test(registry_client=client)

    result = CliRunner().invoke(cli, ["search", f"{REGISTRY}/charts/nginx"], obj=ctx)

    assert result.exit_code == 0, result.output
    assert result.stdout.splitlines() == _table(("charts/nginx", "2.0.0,1.0.0"))
    assert (
        f"INFO: Parsed registry: {REGISTRY}, specific repository: charts/nginx" in result.stderr
    )
    assert "INFO: Searching for specific repository: charts/nginx" in result.stderr
    assert client.calls == [("ls", f"{REGISTRY}/charts/nginx", None)]


def test_search_specific_repository_failure_suggests_credentials() -> None:
    ctx = HelmOciContext.for_test(registry_client=FakeRegistryClient())

    result = CliRunner().invoke(cli, ["search", f"{REGISTRY}/charts/nginx"], obj=ctx)

    assert result.exit_code == 1
    assert f"ERROR: Failed to get tags for repository: {REGISTRY}/charts/nginx" in result.stderr
    assert f"ERROR: Command failed: crane ls {REGISTRY}/charts/nginx" in result.stderr
    assert (
        f"helm oci search {REGISTRY}/charts/nginx --username <username> --password <password>"
        in result.stderr
    )
    assert result.stdout == ""


def test_search_catalog_failure_mentions_docker_config() -> None:
    ctx = HelmOciContext.for_test(registry_client=FakeRegistryClient())

    result = CliRunner().invoke(cli, ["search", REGISTRY, "nginx"], obj=ctx)

    assert result.exit_code == 1
    assert "ERROR: Failed to get repository list from registry" in result.stderr
    assert "ERROR: UNAUTHORIZED: authentication required" in result.stderr
    assert f"helm oci search {REGISTRY} --username <username>" in result.stderr
    assert "~/.docker/config.json" in result.stderr


def test_search_masks_password_in_failed_command() -> None:
    ctx = HelmOciContext.for_test(registry_client=FakeRegistryClient())

    result = CliRunner().invoke(
        cli, ["search", REGISTRY, "--username", "bob", "--password", "hunter2"], obj=ctx
    )

    assert result.exit_code == 1
    assert f"crane catalog {REGISTRY} --username bob --password ****" in result.stderr
    assert "hunter2" not in result.output


def test_search_forwards_credentials_to_every_lookup() -> None:
    credentials = Credentials("bob", "hunter2")
    client = FakeRegistryClient(catalogs={REGISTRY: ["a"]}, tags={f"{REGISTRY}/a": ["1"]})
    ctx = HelmOciContext.for_test(registry_client=client)

    result = CliRunner().invoke(
        cli, ["search", REGISTRY, "--username", "bob", "--password", "hunter2"], obj=ctx
    )

    assert result.exit_code == 0
    assert client.calls == [
        ("catalog", REGISTRY, credentials),
        ("ls", f"{REGISTRY}/a", credentials),
    ]


def test_search_path_with_pattern_searches_catalog_of_whole_argument() -> None:
    client = FakeRegistryClient(catalogs={f"{REGISTRY}/charts": []})
    ctx = HelmOciContext.for_test(registry_client=client)

    result = CliRunner().invoke(cli, ["search", f"{REGISTRY}/charts", "nginx"], obj=ctx)

    assert result.exit_code == 0
    assert client.calls == [("catalog", f"{REGISTRY}/charts", None)]


def test_search_invalid_pattern_is_a_usage_error() -> None:
    client = FakeRegistryClient(catalogs={REGISTRY: ["a"]})
    ctx = HelmOciContext.for_test(registry_client=client)

    result = CliRunner().invoke(cli, ["search", REGISTRY, "[unclosed"], obj=ctx)

    assert result.exit_code == 1
    assert "ERROR: Invalid pattern" in result.stderr
    assert client.calls == []


def test_search_without_registry_shows_usage() -> None:
    result = CliRunner().invoke(cli, ["search"], obj=HelmOciContext.for_test())

    assert result.exit_code == 1
    assert "ERROR: Registry URL is required" in result.stderr
    assert "Usage: helm oci search <registry> [pattern]" in result.stderr
