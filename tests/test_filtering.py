"""Tests for lightbox.filtering module."""

from conftest import make_entry
from lightbox.filtering import filter_entries, matches


class TestMatches:
    def test_empty_query_matches(self):
        assert matches(make_entry("anything.png"), "")

    def test_substring(self):
        assert matches(make_entry("holiday.png"), "lid")
        assert not matches(make_entry("holiday.png"), "xyz")

    def test_case_insensitive(self):
        assert matches(make_entry("IMG_0001.JPG"), "img_0001.jpg")
        assert matches(make_entry("photo.png"), "PHOTO")


class TestFilterEntries:
    def test_filters_and_preserves_order(self):
        items = [make_entry("image1.png"), make_entry("photo.png"), make_entry("imgur.jpg")]
        result = filter_entries(items, "img")
        assert [e.name for e in result] == ["imgur.jpg"]

    def test_example_with_uppercase_query(self):
        items = [make_entry("image1.png"), make_entry("photo.png"), make_entry("imgur.jpg")]
        result = filter_entries(items, "IM")
        assert [e.name for e in result] == ["image1.png", "imgur.jpg"]

    def test_empty_query_returns_all(self):
        items = [make_entry("b.png"), make_entry("a.png")]
        assert filter_entries(items, "") == items

    def test_no_match(self):
        assert filter_entries([make_entry("a.png")], "zzz") == []
