"""Make the crane binary available at the plugin-local path.

Strategies are tried in a fixed order (see STRATEGY_ORDER):

1. EXISTING_LOCAL: a working binary is already installed in the plugin
2. EXISTING_ON_PATH: a crane on PATH is symlinked into the plugin
3. PACKAGE_MANAGER: Homebrew install on macOS, then symlinked
4. DIRECT_DOWNLOAD: release archive from GitHub, extracted into place

Any strategy that installs something is followed by a `crane version`
verification. Nothing is retried.
"""

import logging
import os
import shutil
import stat
import tarfile
import tempfile
from pathlib import Path

from helm_oci.core.config import PluginConfig
from helm_oci.core.feedback import UserFeedback
from helm_oci.core.provision.releases import ReleaseSource
from helm_oci.core.provision.types import (
    STRATEGY_ORDER,
    InstallStrategy,
    ProvisionError,
    detect_target_platform,
)
from helm_oci.core.shell import Shell

logger = logging.getLogger(__name__)


def _is_executable(path: Path) -> bool:
    return path.is_file() and os.access(path, os.X_OK)


def find_binary_in_tree(root: Path, name: str) -> Path | None:
    """Find the first regular file called `name` below `root`.

    Symlinks are ignored so an archive cannot point the install at a file
    outside the extraction directory.
    """
    for candidate in sorted(root.rglob(name)):
        if candidate.is_file() and not candidate.is_symlink():
            return candidate
    return None


class BinaryProvisioner:
    """Ensure the registry client binary exists and answers a version probe.

    Example:
        provisioner = BinaryProvisioner(config, RealShell(), releases, feedback)
        binary = provisioner.ensure_binary()
    """

    def __init__(
        self,
        config: PluginConfig,
        shell: Shell,
        releases: ReleaseSource,
        feedback: UserFeedback,
    ) -> None:
        self._config = config
        self._shell = shell
        self._releases = releases
        self._feedback = feedback

    def close(self) -> None:
        self._releases.close()

    def __enter__(self) -> "BinaryProvisioner":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    @property
    def feedback(self) -> UserFeedback:
        return self._feedback

    @property
    def binary_path(self) -> Path:
        return self._config.binary_path

    def ensure_binary(self) -> Path:
        """Run the strategies in priority order until one succeeds.

        Returns:
            Path of the verified plugin-local binary

        Raises:
            ProvisionError: If every strategy failed or verification failed
        """
        handlers = {
            InstallStrategy.EXISTING_LOCAL: self._use_existing_local,
            InstallStrategy.EXISTING_ON_PATH: self._link_existing_on_path,
            InstallStrategy.PACKAGE_MANAGER: self._install_with_package_manager,
            InstallStrategy.DIRECT_DOWNLOAD: self._install_with_download,
        }
        for strategy in STRATEGY_ORDER:
            logger.debug("Trying install strategy: %s", strategy.value)
            if not handlers[strategy]():
                continue
            if strategy is not InstallStrategy.EXISTING_LOCAL:
                self._verify(strategy)
            return self.binary_path

        raise ProvisionError(f"Could not install crane for {self._shell.system()}")

    def _probe_version(self, binary: Path) -> str | None:
        output = self._shell.capture([str(binary), "version"])
        if output is None:
            return None
        lines = output.splitlines()
        return lines[0] if lines else "unknown"

    def _use_existing_local(self) -> bool:
        if not _is_executable(self.binary_path):
            return False
        version = self._probe_version(self.binary_path)
        if version is None:
            self._feedback.warn(f"Crane at {self.binary_path} does not respond, reinstalling")
            return False
        self._feedback.info(f"Crane already available in plugin: {version}")
        return True

    def _link(self, target: Path) -> None:
        self._config.bin_dir.mkdir(parents=True, exist_ok=True)
        if self.binary_path.is_symlink() or self.binary_path.exists():
            self.binary_path.unlink()
        self.binary_path.symlink_to(target)

    def _link_existing_on_path(self) -> bool:
        found = self._shell.get_installed_tool_path(self._config.binary_name)
        if found is None:
            self._feedback.info("Crane not found in system PATH")
            return False

        system_path = Path(found)
        if system_path.resolve() == self.binary_path.resolve():
            # PATH points at our own broken copy
            return False

        self._feedback.info("Crane found in system PATH")
        try:
            self._link(system_path)
        except OSError as e:
            self._feedback.warn(f"Failed to create symlink to system crane: {e}")
            return False
        self._feedback.info(f"Created symlink to system crane: {system_path}")
        return True

    def _install_with_package_manager(self) -> bool:
        if self._shell.system() != "Darwin":
            return False
        if self._shell.get_installed_tool_path("brew") is None:
            self._feedback.info("Homebrew not found, falling back to download")
            return False

        self._feedback.info("Installing crane using Homebrew")
        if self._shell.run_command(["brew", "install", self._config.binary_name]) != 0:
            raise ProvisionError("Failed to install crane using brew")

        brew_binary: Path | None = None
        prefix = self._shell.capture(["brew", "--prefix", self._config.binary_name])
        if prefix:
            candidate = Path(prefix) / "bin" / self._config.binary_name
            if _is_executable(candidate):
                brew_binary = candidate
        if brew_binary is None:
            on_path = self._shell.get_installed_tool_path(self._config.binary_name)
            if on_path is not None:
                brew_binary = Path(on_path)
        if brew_binary is None:
            raise ProvisionError("Could not find brew-installed crane binary")

        try:
            self._link(brew_binary)
        except OSError as e:
            raise ProvisionError(f"Failed to create symlink to crane binary: {e}") from e
        return True

    def _resolve_version(self) -> str:
        self._feedback.info("Fetching latest crane version from GitHub...")
        version = self._releases.latest_version()
        if version is None:
            fallback = self._config.fallback_version
            self._feedback.warn(
                f"Could not fetch latest version. Using fallback version {fallback}"
            )
            return fallback
        return version

    def _install_with_download(self) -> bool:
        target = detect_target_platform(self._shell.system(), self._shell.machine())
        version = self._resolve_version()
        url = (
            f"{self._config.release_download_url}/{version}/"
            f"go-containerregistry_{target.archive_suffix}.tar.gz"
        )
        self._feedback.info(f"Installing crane {version} for {target.archive_suffix} via download")
        self._feedback.info(f"Downloading crane from {url}")

        with tempfile.TemporaryDirectory(prefix="helm-oci-") as temp_name:
            temp_dir = Path(temp_name)
            archive_path = temp_dir / "crane.tar.gz"
            self._releases.download(url, archive_path)

            self._feedback.info("Extracting crane binary...")
            extract_dir = temp_dir / "extract"
            extract_dir.mkdir()
            try:
                with tarfile.open(archive_path, "r:gz") as archive:
                    archive.extractall(extract_dir, filter="data")
            except (tarfile.TarError, OSError) as e:
                raise ProvisionError(f"Failed to extract crane archive: {e}") from e

            extracted = find_binary_in_tree(extract_dir, self._config.binary_name)
            if extracted is None:
                raise ProvisionError("Crane binary not found in archive")

            try:
                self._config.bin_dir.mkdir(parents=True, exist_ok=True)
                if self.binary_path.is_symlink() or self.binary_path.exists():
                    self.binary_path.unlink()
                shutil.move(str(extracted), self.binary_path)
                mode = self.binary_path.stat().st_mode
                self.binary_path.chmod(mode | stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH)
            except OSError as e:
                raise ProvisionError(f"Failed to install crane binary: {e}") from e
        return True

    def _verify(self, strategy: InstallStrategy) -> None:
        version = self._probe_version(self.binary_path)
        if version is None:
            raise ProvisionError("Crane installation verification failed")
        self._feedback.success(f"Crane installed successfully via {strategy.value}")
        self._feedback.info(f"Crane version: {version}")
