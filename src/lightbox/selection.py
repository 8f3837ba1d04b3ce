"""Single-selection cursor over the filtered entries.

All functions are pure: they take the filtered entries and the selected
path and return an index or a path. Moving the selection is done by the
caller through `path_at`, which ignores out-of-range indexes.
"""

from pathlib import Path
from typing import Sequence

from .listing import Entry


def selected_index(items: Sequence[Entry], selected_path: Path | None) -> int | None:
    """Index of the selected entry, or None if nothing is selected or it is filtered out."""
    if not selected_path:
        return None
    for index, entry in enumerate(items):
        if entry.path == selected_path:
            return index
    return None


def path_at(items: Sequence[Entry], index: int | None) -> Path | None:
    """Path of the entry at index, or None when index is out of range."""
    if index is None or not 0 <= index < len(items):
        return None
    return items[index].path


def first_index(items: Sequence[Entry]) -> int:
    return 0


def last_index(items: Sequence[Entry]) -> int:
    return len(items) - 1


def previous_index(items: Sequence[Entry], selected_path: Path | None) -> int:
    """One before the selection. With no selection this is -2, which is out of range."""
    current = selected_index(items, selected_path)
    return (current if current is not None else -1) - 1


def next_index(items: Sequence[Entry], selected_path: Path | None) -> int:
    """One after the selection. With no selection this is the first entry."""
    current = selected_index(items, selected_path)
    return (current if current is not None else -1) + 1
