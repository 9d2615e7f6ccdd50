"""Tests for the list command."""

from click.testing import CliRunner

from helm_oci.cli.cli import cli
from helm_oci.cli.help_text import LIST_USAGE
from helm_oci.core.context import HelmOciContext
from helm_oci.core.registry_client.fake import FakeRegistryClient
from helm_oci.core.registry_client.types import Credentials

REGISTRY = "registry.example.com"


def test_list_prints_one_repository_per_line() -> None:
    client = FakeRegistryClient(catalogs={REGISTRY: ["charts/nginx", "charts/redis"]})
    ctx = HelmOciContext.for_test(registry_client=client)

    result = CliRunner().invoke(cli, ["list", REGISTRY], obj=ctx)

    assert result.exit_code == 0, result.output
    assert result.stdout == "charts/nginx\ncharts/redis\n"
    assert f"INFO: Listing repositories in registry: {REGISTRY}" in result.stderr
    assert "SUCCESS: Successfully listed repositories" in result.stderr
    assert client.calls == [("catalog", REGISTRY, None)]


def test_list_empty_registry_succeeds_with_no_data() -> None:
    client = FakeRegistryClient(catalogs={REGISTRY: []})
    ctx = HelmOciContext.for_test(registry_client=client)

    result = CliRunner().invoke(cli, ["list", REGISTRY], obj=ctx)

    assert result.exit_code == 0
    assert result.stdout == ""


def test_list_forwards_credentials() -> None:
    client = FakeRegistryClient(catalogs={REGISTRY: ["a"]})
    ctx = HelmOciContext.for_test(registry_client=client)

    result = CliRunner().invoke(
        cli, ["list", REGISTRY, "--username", "bob", "--password", "hunter2"], obj=ctx
    )

    assert result.exit_code == 0
    assert client.calls == [("catalog", REGISTRY, Credentials("bob", "hunter2"))]


def test_list_options_may_precede_registry() -> None:
    client = FakeRegistryClient(catalogs={REGISTRY: ["a"]})
    ctx = HelmOciContext.for_test(registry_client=client)

    result = CliRunner().invoke(
        cli, ["list", "--username", "bob", "--password", "hunter2", REGISTRY], obj=ctx
    )

    assert result.exit_code == 0
    assert client.calls == [("catalog", REGISTRY, Credentials("bob", "hunter2"))]


def test_list_drops_lone_username() -> None:
    client = FakeRegistryClient(catalogs={REGISTRY: ["a"]})
    ctx = HelmOciContext.for_test(registry_client=client)

    result = CliRunner().invoke(cli, ["list", REGISTRY, "--username", "bob"], obj=ctx)

    assert result.exit_code == 0
    assert client.calls == [("catalog", REGISTRY, None)]


def test_list_without_registry_shows_usage() -> None:
    client = FakeRegistryClient()
    ctx = HelmOciContext.for_test(registry_client=client)

    result = CliRunner().invoke(cli, ["list"], obj=ctx)

    assert result.exit_code == 1
    assert "ERROR: Registry URL is required" in result.stderr
    assert LIST_USAGE in result.stderr
    assert result.stdout == ""
    assert client.calls == []


def test_list_without_crane_suggests_update() -> None:
    client = FakeRegistryClient(installed=False)
    ctx = HelmOciContext.for_test(registry_client=client)

    result = CliRunner().invoke(cli, ["list", REGISTRY], obj=ctx)

    assert result.exit_code == 1
    assert f"ERROR: Crane binary not found at {ctx.config.binary_path}" in result.stderr
    assert "helm plugin update oci" in result.stderr
    assert client.calls == []


def test_list_failure_reports_registry_error() -> None:
    ctx = HelmOciContext.for_test(registry_client=FakeRegistryClient())

    result = CliRunner().invoke(cli, ["list", REGISTRY], obj=ctx)

    assert result.exit_code == 1
    assert "ERROR: Failed to list repositories" in result.stderr
    assert "ERROR: UNAUTHORIZED: authentication required" in result.stderr
    assert result.stdout == ""


def test_list_ignores_second_positional() -> None:
    client = FakeRegistryClient(catalogs={REGISTRY: ["a"]})
    ctx = HelmOciContext.for_test(registry_client=client)

    result = CliRunner().invoke(cli, ["list", REGISTRY, "other.example.com"], obj=ctx)

    assert result.exit_code == 0, result.output
    assert result.stdout == "a\n"
    assert client.calls == [("catalog", REGISTRY, None)]


def test_list_rejects_third_positional() -> None:
    client = FakeRegistryClient(catalogs={REGISTRY: ["a"]})
    ctx = HelmOciContext.for_test(registry_client=client)

    result = CliRunner().invoke(cli, ["list", REGISTRY, "two", "three"], obj=ctx)

    assert result.exit_code == 1
    assert "ERROR:" in result.stderr
    assert client.calls == []


def test_list_rejects_unknown_options() -> None:
    ctx = HelmOciContext.for_test()

    result = CliRunner().invoke(cli, ["list", REGISTRY, "--token", "x"], obj=ctx)

    assert result.exit_code == 1
    assert "--token" in result.stderr
