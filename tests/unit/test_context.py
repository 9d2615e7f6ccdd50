"""Tests for context construction."""

from pathlib import Path

from helm_oci.core.config import PluginConfig
from helm_oci.core.context import HelmOciContext, create_context
from helm_oci.core.helm.fake import FakeHelm
from helm_oci.core.helm.real import RealHelm
from helm_oci.core.registry_client.fake import FakeRegistryClient
from helm_oci.core.registry_client.real import RealRegistryClient


def test_create_context_wires_real_integrations(tmp_path: Path) -> None:
    config = PluginConfig.for_test(plugin_dir=tmp_path)

    ctx = create_context(config)

    assert ctx.config is config
    assert isinstance(ctx.helm, RealHelm)
    assert isinstance(ctx.registry_client, RealRegistryClient)
    assert ctx.registry_client.binary_path == tmp_path / "bin" / "crane"


def test_for_test_defaults_to_fakes() -> None:
    ctx = HelmOciContext.for_test()

    assert isinstance(ctx.registry_client, FakeRegistryClient)
    assert isinstance(ctx.helm, FakeHelm)
    assert ctx.config.plugin_dir == Path("/test/plugins/helm-oci")
