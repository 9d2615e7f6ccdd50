"""Fake implementation of Helm for testing."""

from helm_oci.core.helm.abc import Helm


class FakeHelm(Helm):
    """In-memory fake reporting a predetermined Helm version.

    Examples:
        >>> FakeHelm(version="v3").get_version()
        'v3'
        >>> FakeHelm(version=None).get_version() is None
        True
    """

    def __init__(self, *, version: str | None = "v3") -> None:
        self._version = version
        self._calls = 0

    @property
    def call_count(self) -> int:
        """Number of get_version() calls. For test assertions only."""
        return self._calls

    def get_version(self) -> str | None:
        self._calls += 1
        return self._version
