"""Catalog filtering and tag summaries for the search command."""

import re
from collections.abc import Iterator, Sequence
from dataclasses import dataclass

from helm_oci.core.registry_client.abc import RegistryClient
from helm_oci.core.registry_client.types import Credentials, RegistryClientError

MAX_DISPLAYED_TAGS = 3
UNAVAILABLE_TAGS = "N/A"


@dataclass(frozen=True)
class SearchRow:
    """One table row: repository name and its display-ready tag summary."""

    repository: str
    tags: str


def summarize_tags(tags: Sequence[str], limit: int = MAX_DISPLAYED_TAGS) -> str:
    """Join the first `limit` tags with commas, keeping registry order.

    Examples:
        >>> summarize_tags(["1.0.0", "1.1.0", "1.2.0", "2.0.0"])
        '1.0.0,1.1.0,1.2.0'
        >>> summarize_tags([])
        ''
    """
    return ",".join(tags[:limit])


def compile_pattern(pattern: str | None) -> re.Pattern[str] | None:
    """Compile a repository filter.

    Raises:
        ValueError: If the pattern is not a valid regular expression
    """
    if not pattern:
        return None
    try:
        return re.compile(pattern)
    except re.error as e:
        raise ValueError(f"Invalid pattern {pattern!r}: {e}") from e


def filter_repositories(repositories: Sequence[str], pattern: str | None) -> list[str]:
    """Keep repositories matching `pattern` anywhere in the name.

    No pattern keeps everything. Blank entries are always dropped.

    Examples:
        >>> filter_repositories(["nginx", "redis", "nginx-ingress"], "nginx")
        ['nginx', 'nginx-ingress']
    """
    compiled = compile_pattern(pattern)
    return [
        repo
        for repo in repositories
        if repo and (compiled is None or compiled.search(repo) is not None)
    ]


def iter_rows(
    client: RegistryClient,
    registry: str,
    repositories: Sequence[str],
    credentials: Credentials | None,
) -> Iterator[SearchRow]:
    """Look up tags for each repository, one call at a time.

    Rows are yielded as soon as each lookup finishes. A failed lookup yields
    an N/A row and the loop carries on.
    """
    for repo in repositories:
        try:
            tags = client.tags(f"{registry}/{repo}", credentials)
        except RegistryClientError:
            yield SearchRow(repository=repo, tags=UNAVAILABLE_TAGS)
            continue
        yield SearchRow(repository=repo, tags=summarize_tags(tags))
