"""Tests for lightbox.sorting module."""

from pathlib import Path

import pytest

from conftest import make_entry
from lightbox.sorting import (
    DEFAULT_SORT_OPTION,
    SORT_REVERSED,
    SortOption,
    SortPreferences,
    compare_entries,
    next_sort_option,
    sort_entries,
)


def names(entries):
    return [e.name for e in entries]


@pytest.fixture
def items():
    return [
        make_entry("b", size=20, mtime=200.0),
        make_entry("a", size=30, mtime=100.0),
        make_entry("c", size=10, mtime=300.0),
    ]


class TestCompareEntries:
    def test_three_way(self):
        a = make_entry("a", size=1)
        b = make_entry("b", size=2)
        assert compare_entries(a, b, "size") == -1
        assert compare_entries(b, a, "size") == 1
        assert compare_entries(a, a, "size") == 0

    def test_tie_broken_by_name(self):
        a = make_entry("a", size=5)
        b = make_entry("b", size=5)
        assert compare_entries(a, b, "size") == -1

    def test_name_is_case_sensitive(self):
        upper = make_entry("Zebra")
        lower = make_entry("apple")
        assert compare_entries(upper, lower, "name") == -1


class TestSortEntries:
    def test_name_ascending_then_descending(self, items):
        assert names(sort_entries(items, SortOption("name", False))) == ["a", "b", "c"]
        assert names(sort_entries(items, SortOption("name", True))) == ["c", "b", "a"]

    def test_size_ascending(self, items):
        assert names(sort_entries(items, SortOption("size", False))) == ["c", "b", "a"]

    def test_mtime_first_click_is_newest_first(self, items):
        assert SORT_REVERSED == {"name": False, "size": False, "mtime": True}
        assert names(sort_entries(items, SortOption("mtime", False))) == ["c", "b", "a"]
        assert names(sort_entries(items, SortOption("mtime", True))) == ["a", "b", "c"]

    def test_equal_keys_fall_back_to_name(self):
        items = [make_entry("y", size=1), make_entry("x", size=1), make_entry("z", size=0)]
        assert names(sort_entries(items, SortOption("size", False))) == ["z", "x", "y"]

    def test_mtime_reversal_also_reverses_tie_break(self):
        items = [make_entry("x", mtime=1.0), make_entry("y", mtime=1.0)]
        assert names(sort_entries(items, SortOption("mtime", False))) == ["y", "x"]

    def test_returns_new_list(self, items):
        result = sort_entries(items, DEFAULT_SORT_OPTION)
        assert result is not items
        assert names(items) == ["b", "a", "c"]

    def test_unknown_key(self, items):
        with pytest.raises(ValueError):
            sort_entries(items, SortOption("colour", False))


class TestNextSortOption:
    def test_same_key_toggles(self):
        option = next_sort_option(SortOption("name", False), "name")
        assert option == SortOption("name", True)
        assert next_sort_option(option, "name") == SortOption("name", False)

    def test_new_key_resets_descending(self):
        assert next_sort_option(SortOption("name", True), "size") == SortOption("size", False)

    def test_unknown_key(self):
        with pytest.raises(ValueError):
            next_sort_option(DEFAULT_SORT_OPTION, "colour")


class TestSortPreferences:
    def test_default(self):
        prefs = SortPreferences()
        assert prefs.get(Path("/a")) == SortOption("name", False)
        assert len(prefs) == 0

    def test_toggle_sequence(self):
        prefs = SortPreferences()
        d = Path("/a")
        assert prefs.toggle(d, "mtime") == SortOption("mtime", False)
        assert prefs.toggle(d, "mtime") == SortOption("mtime", True)
        assert prefs.toggle(d, "mtime") == SortOption("mtime", False)
        assert prefs.toggle(d, "name") == SortOption("name", False)

    def test_per_directory(self):
        prefs = SortPreferences()
        prefs.toggle(Path("/a"), "size")
        assert prefs.get(Path("/a")).key == "size"
        assert prefs.get(Path("/b")) == DEFAULT_SORT_OPTION
        assert len(prefs) == 1

    def test_clear(self):
        prefs = SortPreferences()
        prefs.set(Path("/a"), SortOption("size", True))
        prefs.clear()
        assert prefs.get(Path("/a")) == DEFAULT_SORT_OPTION
