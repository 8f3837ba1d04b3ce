"""Main Textual application for Lightbox."""

from pathlib import Path

from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Vertical
from textual.widgets import Footer, Input

from .actions import EntryActionsMixin, NavigationActionsMixin
from .config import Config
from .explorer import Explorer
from .watcher import DirectoryWatcher
from .widgets import Banner, EntryList, ViewerScreen


class LightboxApp(NavigationActionsMixin, EntryActionsMixin, App):
    """Lightbox - Image Directory Browser TUI."""

    TITLE = "Lightbox"
    SUB_TITLE = "Image Directory Browser"

    CSS = """
    #main-container {
        width: 100%;
        height: 1fr;
    }

    #path-input {
        height: 1;
        border: none;
        padding: 0 1;
    }

    #entry-list {
        height: 1fr;
        border: solid $accent;
    }

    #entry-list:focus-within {
        border: solid cyan;
    }
    """

    BINDINGS = [
        Binding("q", "quit", "Quit"),
        Binding("b,alt+left", "back", "Back"),
        Binding("f,alt+right", "forward", "Forward"),
        Binding("backspace", "parent", "Parent"),
        Binding("tilde", "home", "Home"),
        Binding("right", "enter_selected", "Enter", show=False),
        Binding("slash", "search", "Filter"),
        Binding("1", "sort_name", "Name"),
        Binding("2", "sort_size", "Size"),
        Binding("3", "sort_mtime", "Date"),
        Binding("g", "select_first", "First", show=False),
        Binding("G", "select_last", "Last", show=False),
        Binding("k", "select_previous", "Previous", show=False),
        Binding("j", "select_next", "Next", show=False),
        Binding("v", "view", "View"),
        Binding("o", "open_directory", "Open"),
        Binding("ctrl+l", "edit_path", "Path", show=False),
        Binding("r", "reload", "Reload", show=False),
        Binding("?", "help", "Help"),
    ]

    def __init__(self, config: Config, directory: Path | None = None) -> None:
        super().__init__()
        self.config = config
        self._start_directory = Path(directory or config.start_directory).expanduser()
        watcher = None
        if config.watch.enabled:
            watcher = DirectoryWatcher(debounce_seconds=config.watch.debounce_seconds)
        self.explorer = Explorer(
            directory=self._start_directory.resolve(),
            watcher=watcher,
            viewer=self._show_viewer,
            notifier=self._show_message,
            focus=self._refresh_view,
            dispatch=self.call_from_thread,
            image_extensions=config.get_image_extensions(),
            show_hidden=config.show_hidden,
        )

    def compose(self) -> ComposeResult:
        yield Banner(id="banner")
        with Vertical(id="main-container"):
            yield Input(placeholder="Directory path", id="path-input")
            yield EntryList(id="entry-list", classes="panel")
        yield Footer()

    def on_mount(self) -> None:
        """Show the start directory."""
        self.explorer.init_directory()

    async def on_unmount(self) -> None:
        """Release the directory watch when the app closes."""
        self.explorer.close()

    def _refresh_entries(self) -> None:
        """Redraw the listing from the explorer's derived state."""
        entry_list = self.query_one("#entry-list", EntryList)
        entry_list.update_entries(
            self.explorer.filtered_items,
            self.explorer.selected_index,
            self.explorer.sort_option,
            self.explorer.query,
        )

    def _refresh_view(self) -> None:
        """Redraw everything after a reload and put the list in focus."""
        explorer = self.explorer
        banner = self.query_one("#banner", Banner)
        banner.update_location(
            explorer.directory, explorer.history_index, len(explorer.history)
        )
        self.query_one("#path-input", Input).value = explorer.directory_input

        self._refresh_entries()

        entry_list = self.query_one("#entry-list", EntryList)
        if entry_list.is_query_mode():
            entry_list.exit_query_mode()
        list_view = entry_list.list_view
        list_view.focus()
        scroll_top = explorer.scroll_top
        self.call_after_refresh(
            lambda: list_view.scroll_to(y=scroll_top, animate=False)
        )

    def _show_viewer(self, paths: list[Path], current_path: Path | None) -> None:
        if not paths:
            self.notify("No images to show", severity="warning")
            return
        self.push_screen(ViewerScreen(paths, current_path))

    def _show_message(self, message: str) -> None:
        self.notify(message, severity="warning")


def run_app(config: Config, directory: Path | None = None) -> None:
    """Run the Lightbox application."""
    app = LightboxApp(config, directory)
    app.run()
