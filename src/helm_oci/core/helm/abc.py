"""Helm host operations interface.

The plugin runs inside Helm. Only the host's major version is of interest,
and only for a compatibility notice: a mismatch is reported, never enforced.
"""

from abc import ABC, abstractmethod

SUPPORTED_HELM_VERSIONS = ("v3", "v4")


class Helm(ABC):
    """Abstract interface for querying the Helm host."""

    @abstractmethod
    def get_version(self) -> str | None:
        """Get the Helm major version, e.g. "v3".

        Returns:
            Major version prefix, or None if helm is missing or the output
            could not be parsed
        """
