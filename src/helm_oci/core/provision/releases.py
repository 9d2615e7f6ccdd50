"""Release metadata and archive downloads for the registry client binary."""

import logging
from abc import ABC, abstractmethod
from pathlib import Path
from types import TracebackType

import httpx
from rich.console import Console
from rich.progress import BarColumn, DownloadColumn, Progress, TextColumn, TransferSpeedColumn

from helm_oci.core.provision.types import ProvisionError

logger = logging.getLogger(__name__)


class ReleaseSource(ABC):
    """Abstract interface for the upstream release distribution."""

    @abstractmethod
    def latest_version(self) -> str | None:
        """Get the tag of the latest published release.

        Returns:
            Release tag (e.g. "v0.20.2"), or None if it could not be determined
        """

    @abstractmethod
    def download(self, url: str, destination: Path) -> None:
        """Download a release archive.

        Args:
            url: Archive URL
            destination: File to write; its parent directory must exist

        Raises:
            ProvisionError: If the archive cannot be downloaded
        """

    def close(self) -> None:
        """Release network resources. The default holds none."""

    def __enter__(self) -> "ReleaseSource":
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()


class GitHubReleases(ReleaseSource):
    """GitHub release API and asset downloads over httpx.

    Download progress is rendered on stderr, never stdout.
    """

    def __init__(
        self,
        api_url: str,
        client: httpx.Client | None = None,
        console: Console | None = None,
    ) -> None:
        self._api_url = api_url
        self._owns_client = client is None
        self._client = client if client is not None else httpx.Client(follow_redirects=True)
        self._console = console if console is not None else Console(stderr=True)

    def close(self) -> None:
        # An injected client belongs to the caller
        if self._owns_client:
            self._client.close()

    def latest_version(self) -> str | None:
        try:
            response = self._client.get(
                self._api_url,
                headers={"Accept": "application/vnd.github+json"},
                timeout=30.0,
            )
            response.raise_for_status()
            payload = response.json()
        except (httpx.HTTPError, ValueError) as e:
            logger.debug("Release query failed: %s", e)
            return None

        if not isinstance(payload, dict):
            return None
        tag = payload.get("tag_name")
        if not isinstance(tag, str) or not tag:
            return None
        return tag

    def download(self, url: str, destination: Path) -> None:
        progress = Progress(
            TextColumn("{task.description}"),
            BarColumn(),
            DownloadColumn(),
            TransferSpeedColumn(),
            console=self._console,
            transient=True,
        )
        try:
            with self._client.stream("GET", url, timeout=60.0) as response:
                response.raise_for_status()
                total = int(response.headers.get("content-length", 0)) or None
                with progress, destination.open("wb") as f:
                    task = progress.add_task(f"Downloading {destination.name}", total=total)
                    for chunk in response.iter_bytes():
                        f.write(chunk)
                        progress.update(task, advance=len(chunk))
        except httpx.HTTPError as e:
            raise ProvisionError(f"Failed to download crane archive from {url}: {e}") from e
        except OSError as e:
            raise ProvisionError(f"Failed to write crane archive to {destination}: {e}") from e
