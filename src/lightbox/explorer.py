"""Directory navigation state: history, listing, sorting, filtering and selection."""

from __future__ import annotations

import logging
from functools import partial
from pathlib import Path
from typing import Callable, Protocol

from .filtering import filter_entries
from .history import HistoryRecord, HistoryStack
from .listing import IMAGE_EXTENSIONS, Entry, list_entries
from .selection import (
    first_index,
    last_index,
    next_index,
    path_at,
    previous_index,
    selected_index,
)
from .shell import open_path
from .sorting import SortOption, SortPreferences, sort_entries

logger = logging.getLogger(__name__)

Lister = Callable[..., list[Entry]]
Viewer = Callable[[list[Path], Path | None], None]


class Watcher(Protocol):
    """The part of DirectoryWatcher the explorer relies on."""

    def watch(self, directory: Path, on_change: Callable[[], None]) -> None: ...
    def close(self) -> None: ...


def _call_now(callback: Callable[[], None]) -> None:
    callback()


def _log_message(message: str) -> None:
    logger.warning(message)


def _no_viewer(paths: list[Path], current_path: Path | None) -> None:
    logger.warning("No viewer attached, ignoring %d path(s)", len(paths))


class Explorer:
    """Navigation controller for one directory browser.

    Owns the history stack, the per-directory sort preferences and the
    single directory watch. The entry list is replaced wholesale on every
    reload; filtered items and the selected index are derived on demand.

    Args:
        directory: Directory shown by init_directory()
        watcher: Watch holder, or None to disable live reloading
        lister: Callable(directory, recursive=False) -> list[Entry]
        viewer: Callable(paths, current_path) opening the image viewer
        shell: Callable(path) -> bool opening a path in the OS file manager
        notifier: Callable(message) showing a user-visible message
        home: Callable returning the home directory
        focus: Called after each reload so the view can take focus
        dispatch: Runs a watcher callback on the owner's event loop
    """

    def __init__(
        self,
        directory: Path,
        watcher: Watcher | None = None,
        lister: Lister | None = None,
        viewer: Viewer | None = None,
        shell: Callable[[Path], bool] = open_path,
        notifier: Callable[[str], None] = _log_message,
        home: Callable[[], Path] = Path.home,
        focus: Callable[[], None] | None = None,
        dispatch: Callable[[Callable[[], None]], None] = _call_now,
        image_extensions: frozenset[str] = IMAGE_EXTENSIONS,
        show_hidden: bool = False,
    ) -> None:
        self.directory = Path(directory)
        self.directory_input = str(self.directory)
        self.items: list[Entry] = []
        self.query = ""
        self.query_input = ""
        self.selected_path: Path | None = None

        self._history = HistoryStack()
        self._sort_preferences = SortPreferences()
        self._watcher = watcher
        self._lister = lister or partial(
            list_entries, extensions=image_extensions, show_hidden=show_hidden
        )
        self._viewer = viewer or _no_viewer
        self._shell = shell
        self._notifier = notifier
        self._home = home
        self._focus = focus
        self._dispatch = dispatch

    # -- history -------------------------------------------------------------

    @property
    def history(self) -> HistoryStack:
        return self._history

    @property
    def history_index(self) -> int:
        return self._history.index

    @property
    def can_back_directory(self) -> bool:
        return self._history.can_go_back

    @property
    def can_forward_directory(self) -> bool:
        return self._history.can_go_forward

    @property
    def back_directories(self) -> list[Path]:
        return self._history.back_directories

    @property
    def forward_directories(self) -> list[Path]:
        return self._history.forward_directories

    @property
    def scroll_top(self) -> float:
        """Remembered scroll offset of the current directory."""
        record = self._history.current
        return record.scroll_top if record is not None else 0

    def set_scroll_top(self, scroll_top: float) -> None:
        """Record the view's scroll offset for the current directory."""
        self._history.update_scroll_top(self._history.index, scroll_top)

    # -- navigation ----------------------------------------------------------

    def init_directory(self) -> None:
        """Load the current directory even if it is already shown."""
        self.change_directory(self.directory, force=True)

    def change_directory(self, path: Path | str, force: bool = False) -> None:
        """Navigate to a directory, discarding any forward history."""
        path = Path(path)
        if path == self.directory and not force:
            return
        self.selected_path = None
        index = self._history.push(HistoryRecord(directory=path, scroll_top=0))
        self.restore(index)

    def change_parent_directory(self) -> None:
        self.change_directory(self.directory.parent)

    def change_home_directory(self) -> None:
        self.change_directory(self._home())

    def change_selected_directory(self) -> None:
        """Enter the selected entry if it is a directory."""
        if self.selected_path and self.selected_path.is_dir():
            self.change_directory(self.selected_path)

    def back_directory(self, offset: int = 0) -> None:
        """Go back `offset + 1` steps. Overshooting the history is a no-op."""
        index = self._history.back_index(offset)
        if index is not None:
            self.restore(index)

    def forward_directory(self, offset: int = 0) -> None:
        """Go forward `offset + 1` steps. Overshooting the history is a no-op."""
        index = self._history.forward_index(offset)
        if index is not None:
            self.restore(index)

    def restore(self, index: int) -> None:
        """Show the directory of a history record."""
        record = self._history.goto(index)
        if record is None:
            return
        self.directory = record.directory
        self.directory_input = str(record.directory)
        self.query = ""
        self.query_input = ""
        self.reload()

    def set_directory_input(self, text: str) -> None:
        self.directory_input = text

    def submit_directory_input(self) -> None:
        """Navigate to the typed path."""
        text = self.directory_input.strip()
        if not text:
            return
        self.change_directory(Path(text).expanduser())

    # -- listing -------------------------------------------------------------

    def _on_directory_changed(self) -> None:
        # Called from a watcher timer thread
        self._dispatch(self.reload)

    def reload(self) -> None:
        """Re-arm the watch and re-list the current directory.

        Listing is best effort: an unreadable or deleted directory shows
        as empty and leaves no watch behind. Any other failure of the
        watcher or lister also leaves the listing empty.
        """
        try:
            if self._watcher is not None:
                self._watcher.watch(self.directory, self._on_directory_changed)
            items = [
                entry
                for entry in self._lister(self.directory)
                if entry.is_directory or entry.is_image
            ]
        except OSError as e:
            logger.debug("Cannot list %s: %s", self.directory, e)
            items = []
        except Exception:
            logger.warning("Listing failed for %s", self.directory, exc_info=True)
            items = []
        self.items = items
        self.sort()
        if self._focus is not None:
            self._focus()

    def close(self) -> None:
        """Release the directory watch."""
        if self._watcher is not None:
            self._watcher.close()

    # -- sorting -------------------------------------------------------------

    @property
    def sort_option(self) -> SortOption:
        """Sort option of the current directory."""
        return self._sort_preferences.get(self.directory)

    @property
    def sort_preferences(self) -> SortPreferences:
        return self._sort_preferences

    def change_sort_key(self, key: str) -> None:
        """Sort by key, flipping direction if it is already the active key."""
        self._sort_preferences.toggle(self.directory, key)
        self.sort()

    def sort(self) -> None:
        self.items = sort_entries(self.items, self.sort_option)

    # -- query ---------------------------------------------------------------

    def set_query_input(self, text: str) -> None:
        self.query_input = text

    def search(self) -> None:
        """Apply the pending query input."""
        self.query = self.query_input

    @property
    def filtered_items(self) -> list[Entry]:
        return filter_entries(self.items, self.query)

    # -- selection -----------------------------------------------------------

    @property
    def selected_index(self) -> int | None:
        return selected_index(self.filtered_items, self.selected_path)

    def is_selected(self, path: Path) -> bool:
        return self.selected_path == path

    def select(self, path: Path | None) -> None:
        self.selected_path = Path(path) if path else None

    def select_index(self, index: int) -> None:
        """Select the filtered entry at index. Out-of-range indexes are ignored."""
        path = path_at(self.filtered_items, index)
        if path is not None:
            self.select(path)

    def select_first(self) -> None:
        self.select_index(first_index(self.filtered_items))

    def select_last(self) -> None:
        self.select_index(last_index(self.filtered_items))

    def select_previous(self) -> None:
        self.select_index(previous_index(self.filtered_items, self.selected_path))

    def select_next(self) -> None:
        self.select_index(next_index(self.filtered_items, self.selected_path))

    # -- collaborators -------------------------------------------------------

    def open_directory(self) -> None:
        """Open the current directory in the OS file manager."""
        if not self._shell(self.directory):
            self._notifier(f'Invalid directory "{self.directory}"')

    def activate(self, path: Path | str) -> None:
        """Enter a directory, or open an image in the viewer."""
        path = Path(path)
        if path.is_dir():
            self.change_directory(path)
        else:
            self.show_viewer(path)

    def show_viewer(self, path: Path | str) -> None:
        """Open the viewer on a directory tree, or on an image and its siblings."""
        path = Path(path)
        if path.is_dir():
            directory, recursive, current_path = path, True, None
        else:
            directory, recursive, current_path = path.parent, False, path

        try:
            entries = self._lister(directory, recursive=recursive)
        except OSError as e:
            logger.warning("Cannot list %s for viewer: %s", directory, e)
            self._notifier(f'Invalid directory "{directory}"')
            return

        paths = [entry.path for entry in entries if entry.is_image]
        self._viewer(paths, current_path)
