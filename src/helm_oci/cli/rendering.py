"""Fixed-width table output for search results."""

from collections.abc import Iterable

from helm_oci.cli.output import machine_output
from helm_oci.core.search import SearchRow

REPOSITORY_WIDTH = 50
TAGS_WIDTH = 20


def format_row(repository: str, tags: str) -> str:
    """Format one table line: two left-justified, space-separated columns.

    Values longer than their column are printed in full, never truncated.
    """
    return f"{repository:<{REPOSITORY_WIDTH}} {tags:<{TAGS_WIDTH}}"


def table_header() -> list[str]:
    return [
        format_row("REPOSITORY", "TAGS"),
        format_row("-" * REPOSITORY_WIDTH, "-" * TAGS_WIDTH),
    ]


def print_table_header() -> None:
    for line in table_header():
        machine_output(line)


def print_rows(rows: Iterable[SearchRow]) -> int:
    """Print rows as they arrive.

    Returns:
        Number of rows printed
    """
    count = 0
    for row in rows:
        machine_output(format_row(row.repository, row.tags))
        count += 1
    return count
