"""Types for binary provisioning."""

from dataclasses import dataclass
from enum import Enum


class ProvisionError(RuntimeError):
    """The registry client binary could not be made available."""


class InstallStrategy(Enum):
    """Ways of making the binary available, in the order they are tried."""

    EXISTING_LOCAL = "existing-local"
    EXISTING_ON_PATH = "existing-on-path"
    PACKAGE_MANAGER = "package-manager"
    DIRECT_DOWNLOAD = "direct-download"


STRATEGY_ORDER = (
    InstallStrategy.EXISTING_LOCAL,
    InstallStrategy.EXISTING_ON_PATH,
    InstallStrategy.PACKAGE_MANAGER,
    InstallStrategy.DIRECT_DOWNLOAD,
)

_OS_NAMES = {
    "Linux": "Linux",
    "Darwin": "Darwin",
}

_ARCH_NAMES = {
    "x86_64": "x86_64",
    "amd64": "x86_64",
    "AMD64": "x86_64",
    "arm64": "arm64",
    "aarch64": "arm64",
}


@dataclass(frozen=True)
class TargetPlatform:
    """OS and architecture names as used in release archive file names."""

    os: str
    arch: str

    @property
    def archive_suffix(self) -> str:
        return f"{self.os}_{self.arch}"


def detect_target_platform(system: str, machine: str) -> TargetPlatform:
    """Map platform.system()/platform.machine() values to release names.

    Raises:
        ProvisionError: If the OS or architecture has no published release

    Examples:
        >>> detect_target_platform("Linux", "aarch64")
        TargetPlatform(os='Linux', arch='arm64')
    """
    os_name = _OS_NAMES.get(system)
    if os_name is None:
        raise ProvisionError(f"Unsupported OS: {system}")
    arch = _ARCH_NAMES.get(machine)
    if arch is None:
        raise ProvisionError(f"Unsupported architecture: {machine}")
    return TargetPlatform(os=os_name, arch=arch)
