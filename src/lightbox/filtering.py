"""Query filtering of directory entries."""

from typing import Iterable

from .listing import Entry


def matches(entry: Entry, query: str) -> bool:
    """Case-insensitive substring match on the entry name. Empty query matches all."""
    if not query:
        return True
    return query.casefold() in entry.name.casefold()


def filter_entries(items: Iterable[Entry], query: str) -> list[Entry]:
    """Entries whose name contains the query, in input order."""
    return [entry for entry in items if matches(entry, query)]
