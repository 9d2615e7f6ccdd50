"""Application context with dependency injection."""

import logging
from dataclasses import dataclass

from helm_oci.core.config import PluginConfig
from helm_oci.core.feedback import InteractiveFeedback, UserFeedback
from helm_oci.core.helm.abc import Helm
from helm_oci.core.helm.real import RealHelm
from helm_oci.core.registry_client.abc import RegistryClient
from helm_oci.core.registry_client.real import RealRegistryClient


@dataclass(frozen=True)
class HelmOciContext:
    """Immutable context holding all dependencies for plugin commands.

    Created at the CLI entry point and threaded through commands with
    click.pass_obj. Frozen to prevent accidental modification at runtime.
    """

    config: PluginConfig
    registry_client: RegistryClient
    helm: Helm
    feedback: UserFeedback

    @staticmethod
    def for_test(
        config: PluginConfig | None = None,
        registry_client: RegistryClient | None = None,
        helm: Helm | None = None,
        feedback: UserFeedback | None = None,
    ) -> "HelmOciContext":
        """Create test context with optional pre-configured integrations.

        Args:
            config: Optional PluginConfig. If None, uses a sentinel plugin dir.
            registry_client: Optional RegistryClient. If None, creates an empty
                FakeRegistryClient (installed, with no registries).
            helm: Optional Helm. If None, creates FakeHelm reporting v3.
            feedback: Optional UserFeedback. If None, uses uncolored
                InteractiveFeedback so tests can assert on plain prefixes.

        Example:
            >>> client = FakeRegistryClient(catalogs={"r.io": ["nginx"]})
            >>> ctx = HelmOciContext.for_test(registry_client=client)
            >>> result = CliRunner().invoke(cli, ["list", "r.io"], obj=ctx)
        """
        from helm_oci.core.helm.fake import FakeHelm
        from helm_oci.core.registry_client.fake import FakeRegistryClient

        if config is None:
            config = PluginConfig.for_test()

        if registry_client is None:
            registry_client = FakeRegistryClient()

        if helm is None:
            helm = FakeHelm(version="v3")

        if feedback is None:
            feedback = InteractiveFeedback(color=False)

        return HelmOciContext(
            config=config,
            registry_client=registry_client,
            helm=helm,
            feedback=feedback,
        )


def configure_logging(config: PluginConfig) -> None:
    """Enable stdlib debug logging when HELM_OCI_DEBUG is set."""
    if config.debug:
        logging.basicConfig(level=logging.DEBUG, format="[DEBUG %(name)s:%(lineno)d] %(message)s")


def create_context(config: PluginConfig | None = None) -> HelmOciContext:
    """Create production context with real implementations.

    Called once at CLI entry point. Nothing here touches the network or runs
    the registry client; the binary is only invoked by the commands that
    need it.
    """
    if config is None:
        config = PluginConfig.from_env()
    configure_logging(config)

    return HelmOciContext(
        config=config,
        registry_client=RealRegistryClient(config.binary_path),
        helm=RealHelm(),
        feedback=InteractiveFeedback(color=config.color),
    )
