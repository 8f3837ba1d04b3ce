"""Shared fixtures for lightbox tests."""

import os
from pathlib import Path

import pytest

from lightbox.explorer import Explorer
from lightbox.listing import Entry


def make_entry(
    name: str,
    size: int = 0,
    mtime: float = 0.0,
    directory: Path = Path("/photos"),
    is_directory: bool = False,
) -> Entry:
    """Build an Entry without touching the filesystem."""
    return Entry(
        path=directory / name,
        name=name,
        is_directory=is_directory,
        is_image=not is_directory and name.lower().endswith((".png", ".jpg")),
        size=size,
        mtime=mtime,
    )


class FakeWatcher:
    """Records watch/close calls and lets tests fire the change callback."""

    def __init__(self) -> None:
        self.watched: list[Path] = []
        self.closed = 0
        self.directory: Path | None = None
        self.on_change = None
        self.fail_on: set[Path] = set()

    def watch(self, directory, on_change) -> None:
        self.close()
        if directory in self.fail_on:
            raise FileNotFoundError(directory)
        self.directory = directory
        self.on_change = on_change
        self.watched.append(directory)

    def close(self) -> None:
        if self.directory is not None:
            self.closed += 1
        self.directory = None
        self.on_change = None

    def fire(self) -> None:
        assert self.on_change is not None
        self.on_change()


class FakeLister:
    """In-memory directory tree: maps a directory to its entries."""

    def __init__(self, tree: dict[Path, list[Entry]] | None = None) -> None:
        self.tree = tree or {}
        self.calls: list[tuple[Path, bool]] = []

    def __call__(self, directory, recursive: bool = False) -> list[Entry]:
        self.calls.append((directory, recursive))
        if directory not in self.tree:
            raise FileNotFoundError(directory)
        return list(self.tree[directory])


@pytest.fixture
def watcher():
    return FakeWatcher()


@pytest.fixture
def messages():
    return []


@pytest.fixture
def viewer_calls():
    return []


@pytest.fixture
def fake_tree():
    """Directories /a, /a/b, /a/c, /a/d, each with one image."""
    root = Path("/a")
    tree = {root: [
        make_entry("b", directory=root, is_directory=True),
        make_entry("c", directory=root, is_directory=True),
        make_entry("d", directory=root, is_directory=True),
        make_entry("cover.png", size=10, mtime=1.0, directory=root),
        make_entry("readme.txt", size=5, mtime=2.0, directory=root),
    ]}
    for name in ("b", "c", "d"):
        sub = root / name
        tree[sub] = [make_entry(f"{name}.png", directory=sub)]
    return tree


@pytest.fixture
def explorer(fake_tree, watcher, messages, viewer_calls):
    """Explorer over the in-memory tree, starting at /a."""
    return Explorer(
        directory=Path("/a"),
        watcher=watcher,
        lister=FakeLister(fake_tree),
        viewer=lambda paths, current: viewer_calls.append((paths, current)),
        shell=lambda path: False,
        notifier=messages.append,
        home=lambda: Path("/a/d"),
    )


@pytest.fixture
def sample_tree(tmp_path):
    """Create an image directory tree on disk with known mtimes and sizes."""
    photos = tmp_path / "photos"
    photos.mkdir()

    (photos / "beach.png").write_bytes(b"x" * 300)
    (photos / "Alps.JPG").write_bytes(b"x" * 100)
    (photos / "city.webp").write_bytes(b"x" * 200)
    (photos / "notes.txt").write_text("not an image")
    (photos / ".hidden.png").write_bytes(b"x")

    os.utime(photos / "beach.png", (1_000, 1_000))
    os.utime(photos / "Alps.JPG", (3_000, 3_000))
    os.utime(photos / "city.webp", (2_000, 2_000))

    trips = photos / "trips"
    trips.mkdir()
    (trips / "rome.jpg").write_bytes(b"x" * 10)
    nested = trips / "2019"
    nested.mkdir()
    (nested / "paris.png").write_bytes(b"x" * 20)

    return photos
