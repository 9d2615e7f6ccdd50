"""Plugin configuration loaded from environment variables."""

import os
from dataclasses import dataclass
from pathlib import Path

DEFAULT_CRANE_VERSION = "v0.19.0"
RELEASE_API_URL = "https://api.github.com/repos/google/go-containerregistry/releases/latest"
RELEASE_DOWNLOAD_URL = "https://github.com/google/go-containerregistry/releases/download"


def _default_plugin_dir() -> Path:
    return Path.home() / ".local" / "share" / "helm" / "plugins" / "helm-oci"


def _env_flag(name: str) -> bool:
    return os.environ.get(name, "false").lower() in ("1", "true", "yes")


@dataclass(frozen=True)
class PluginConfig:
    """Paths and switches shared by every component.

    Built once at the entry point and passed down explicitly; nothing in the
    package reads these values from module globals.
    """

    plugin_dir: Path
    binary_name: str
    fallback_version: str
    release_api_url: str
    release_download_url: str
    color: bool
    debug: bool

    @property
    def bin_dir(self) -> Path:
        return self.plugin_dir / "bin"

    @property
    def binary_path(self) -> Path:
        return self.bin_dir / self.binary_name

    @staticmethod
    def from_env() -> "PluginConfig":
        """Load configuration from environment variables.

        Helm exports HELM_PLUGIN_DIR when it runs a plugin command or hook.
        """
        plugin_dir_env = os.environ.get("HELM_PLUGIN_DIR")
        plugin_dir = Path(plugin_dir_env) if plugin_dir_env else _default_plugin_dir()
        no_color = "NO_COLOR" in os.environ or _env_flag("HELM_OCI_NO_COLOR")
        return PluginConfig(
            plugin_dir=plugin_dir,
            binary_name="crane",
            fallback_version=os.environ.get("HELM_OCI_CRANE_VERSION", DEFAULT_CRANE_VERSION),
            release_api_url=RELEASE_API_URL,
            release_download_url=RELEASE_DOWNLOAD_URL,
            color=not no_color,
            debug=_env_flag("HELM_OCI_DEBUG"),
        )

    @staticmethod
    def for_test(plugin_dir: Path | None = None, color: bool = False) -> "PluginConfig":
        """Create configuration rooted at a sentinel or temporary plugin directory."""
        return PluginConfig(
            plugin_dir=plugin_dir if plugin_dir is not None else Path("/test/plugins/helm-oci"),
            binary_name="crane",
            fallback_version=DEFAULT_CRANE_VERSION,
            release_api_url=RELEASE_API_URL,
            release_download_url=RELEASE_DOWNLOAD_URL,
            color=color,
            debug=False,
        )
