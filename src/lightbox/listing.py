"""Directory listing and entry classification."""

import os
from dataclasses import dataclass
from pathlib import Path

IMAGE_EXTENSIONS = frozenset({
    ".apng",
    ".avif",
    ".bmp",
    ".gif",
    ".ico",
    ".jpeg",
    ".jpg",
    ".png",
    ".svg",
    ".tif",
    ".tiff",
    ".webp",
})


def is_image(path: Path, extensions: frozenset[str] = IMAGE_EXTENSIONS) -> bool:
    """Check if the path has an image suffix."""
    return path.suffix.lower() in extensions


@dataclass(frozen=True)
class Entry:
    """Snapshot of one filesystem node."""

    path: Path
    name: str
    is_directory: bool
    is_image: bool
    size: int
    mtime: float

    @classmethod
    def from_path(
        cls, path: Path, extensions: frozenset[str] = IMAGE_EXTENSIONS
    ) -> "Entry":
        """Stat a path and classify it. Raises OSError if it cannot be read."""
        st = path.stat()
        is_directory = path.is_dir()
        return cls(
            path=path,
            name=path.name,
            is_directory=is_directory,
            is_image=not is_directory and is_image(path, extensions),
            size=st.st_size,
            mtime=st.st_mtime,
        )


def _iter_children(directory: Path, recursive: bool, show_hidden: bool):
    """Yield child paths, descending into subdirectories when recursive."""
    with os.scandir(directory) as it:
        children = sorted(Path(e.path) for e in it)

    for child in children:
        if not show_hidden and child.name.startswith("."):
            continue
        yield child
        if recursive and child.is_dir() and not child.is_symlink():
            try:
                yield from _iter_children(child, recursive, show_hidden)
            except OSError:
                # Unreadable subdirectory, keep the rest of the tree
                continue


def list_entries(
    directory: Path,
    recursive: bool = False,
    extensions: frozenset[str] = IMAGE_EXTENSIONS,
    show_hidden: bool = False,
) -> list[Entry]:
    """
    List the children of a directory.

    Args:
        directory: Directory to enumerate
        recursive: Include all nested descendants
        extensions: Suffixes classified as images
        show_hidden: Include dotfiles

    Returns:
        Entries ordered by path

    Raises:
        OSError: If the directory itself cannot be read
    """
    entries = []
    for child in _iter_children(Path(directory), recursive, show_hidden):
        try:
            entries.append(Entry.from_path(child, extensions))
        except OSError:
            # Removed between scandir and stat, or a broken symlink
            continue
    return entries
