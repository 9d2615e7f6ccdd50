"""Resolve what a search argument refers to."""

from dataclasses import dataclass


@dataclass(frozen=True)
class SearchTarget:
    """Resolved search input.

    Exactly one of the two modes applies:
    - repository is set: list tags of registry/repository
    - repository is None: list the registry catalog, filtered by pattern
    """

    registry: str
    repository: str | None
    pattern: str | None

    @property
    def is_specific_repository(self) -> bool:
        return self.repository is not None

    @property
    def repository_reference(self) -> str:
        return f"{self.registry}/{self.repository}"


def resolve_search_target(registry_or_path: str, pattern: str | None) -> SearchTarget:
    """Decide between a single-repository lookup and a catalog search.

    A first argument containing "/" with no pattern always names a repository:
    everything before the first "/" is the registry, the rest is the
    repository path. With a pattern present, the first argument is taken as
    the registry as-is.

    Examples:
        >>> resolve_search_target("r.example.com/team/chart", None)
        SearchTarget(registry='r.example.com', repository='team/chart', pattern=None)
        >>> resolve_search_target("r.example.com", "nginx")
        SearchTarget(registry='r.example.com', repository=None, pattern='nginx')
    """
    if not pattern:
        pattern = None

    if "/" in registry_or_path and pattern is None:
        registry, repository = registry_or_path.split("/", 1)
        return SearchTarget(registry=registry, repository=repository, pattern=None)

    return SearchTarget(registry=registry_or_path, repository=None, pattern=pattern)
