"""Tests for the install hook entry point."""

from pathlib import Path

from click.testing import CliRunner

from helm_oci.cli.commands.install_cmd import install_cmd
from helm_oci.core.config import PluginConfig
from helm_oci.core.feedback import InteractiveFeedback
from helm_oci.core.provision.provisioner import BinaryProvisioner
from tests.fakes.releases import FakeReleaseSource
from tests.fakes.shell import FakeShell


def _provisioner(
    config: PluginConfig, shell: FakeShell, releases: FakeReleaseSource | None = None
) -> BinaryProvisioner:
    return BinaryProvisioner(
        config=config,
        shell=shell,
        releases=releases or FakeReleaseSource(),
        feedback=InteractiveFeedback(color=False),
    )


def test_install_with_existing_binary(tmp_path: Path) -> None:
    config = PluginConfig.for_test(plugin_dir=tmp_path)
    config.bin_dir.mkdir(parents=True)
    config.binary_path.write_text("#!/bin/sh\n")
    config.binary_path.chmod(0o755)
    shell = FakeShell(outputs={(str(config.binary_path), "version"): "v0.19.0"})

    result = CliRunner().invoke(install_cmd, [], obj=_provisioner(config, shell))

    assert result.exit_code == 0, result.output
    assert "INFO: Helm OCI Plugin - Checking/Installing crane dependency" in result.stderr
    assert "SUCCESS: Crane setup completed" in result.stderr
    assert result.stdout == ""


def test_install_failure_exits_one(tmp_path: Path) -> None:
    config = PluginConfig.for_test(plugin_dir=tmp_path)
    shell = FakeShell(system="Windows", machine="AMD64")

    result = CliRunner().invoke(install_cmd, [], obj=_provisioner(config, shell))

    assert result.exit_code == 1
    assert "ERROR: Unsupported OS: Windows" in result.stderr
    assert "Crane setup completed" not in result.stderr


def test_install_closes_release_source(tmp_path: Path) -> None:
    config = PluginConfig.for_test(plugin_dir=tmp_path)
    releases = FakeReleaseSource()
    shell = FakeShell(system="Windows", machine="AMD64")

    result = CliRunner().invoke(install_cmd, [], obj=_provisioner(config, shell, releases))

    assert result.exit_code == 1
    assert releases.closed
