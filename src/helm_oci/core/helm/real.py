"""Real Helm host queries using the helm CLI."""

import re
import subprocess

from helm_oci.core.helm.abc import Helm

_MAJOR_VERSION = re.compile(r"v\d")


class RealHelm(Helm):
    """Production implementation calling `helm version --short`."""

    def get_version(self) -> str | None:
        try:
            result = subprocess.run(
                ["helm", "version", "--short"],
                capture_output=True,
                text=True,
                check=False,
            )
        except FileNotFoundError:
            return None
        if result.returncode != 0:
            return None
        match = _MAJOR_VERSION.search(result.stdout)
        if match is None:
            return None
        return match.group(0)
