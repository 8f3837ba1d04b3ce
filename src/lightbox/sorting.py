"""Entry ordering and per-directory sort preferences."""

from dataclasses import dataclass
from functools import cmp_to_key
from pathlib import Path
from typing import Iterable, Literal

from .listing import Entry

SortKey = Literal["name", "size", "mtime"]

SORT_KEYS: tuple[str, ...] = ("name", "size", "mtime")

# Keys whose natural first-click order is descending (newest first for mtime)
SORT_REVERSED: dict[str, bool] = {
    "name": False,
    "size": False,
    "mtime": True,
}


@dataclass(frozen=True)
class SortOption:
    """Sort key and direction for one directory."""

    key: SortKey = "name"
    descending: bool = False


DEFAULT_SORT_OPTION = SortOption()


def _compare(a, b) -> int:
    if a > b:
        return 1
    if a < b:
        return -1
    return 0


def compare_entries(a: Entry, b: Entry, key: str) -> int:
    """Three-way comparison on one field, ties broken by name."""
    result = _compare(getattr(a, key), getattr(b, key))
    if result == 0:
        result = _compare(a.name, b.name)
    return result


def sort_entries(items: Iterable[Entry], option: SortOption) -> list[Entry]:
    """Return items ordered by the given option."""
    if option.key not in SORT_KEYS:
        raise ValueError(f"Unknown sort key: {option.key!r}")

    sign = -1 if SORT_REVERSED[option.key] else 1
    if option.descending:
        sign = -sign

    def cmp(a: Entry, b: Entry) -> int:
        return sign * compare_entries(a, b, option.key)

    return sorted(items, key=cmp_to_key(cmp))


def next_sort_option(current: SortOption, key: str) -> SortOption:
    """Option after choosing a key: same key flips direction, new key starts ascending."""
    if key not in SORT_KEYS:
        raise ValueError(f"Unknown sort key: {key!r}")
    if current.key == key:
        return SortOption(key=key, descending=not current.descending)
    return SortOption(key=key, descending=False)


class SortPreferences:
    """Sort option remembered per directory for the life of the process."""

    def __init__(self) -> None:
        self._options: dict[Path, SortOption] = {}

    def get(self, directory: Path) -> SortOption:
        """Get the option for a directory, or the default if never sorted."""
        return self._options.get(directory, DEFAULT_SORT_OPTION)

    def set(self, directory: Path, option: SortOption) -> None:
        self._options[directory] = option

    def toggle(self, directory: Path, key: str) -> SortOption:
        """Apply a key choice to a directory and return the stored option."""
        option = next_sort_option(self.get(directory), key)
        self.set(directory, option)
        return option

    def clear(self) -> None:
        self._options.clear()

    def __len__(self) -> int:
        return len(self._options)
