"""Image viewer modal stepping through a list of image paths."""

from datetime import datetime
from pathlib import Path

from rich.text import Text

from textual.app import ComposeResult
from textual.binding import Binding
from textual.containers import Vertical
from textual.screen import ModalScreen
from textual.widgets import Static

from .entry_list import format_size


def describe_image(path: Path) -> Text:
    """Name, size and modification time of an image."""
    text = Text()
    text.append(path.name, style="bold")
    text.append("\n")
    text.append(str(path.parent), style="dim")
    try:
        st = path.stat()
    except OSError:
        text.append("\n\n(missing)", style="italic red")
        return text
    modified = datetime.fromtimestamp(st.st_mtime).strftime("%Y-%m-%d %H:%M")
    text.append(f"\n\n{format_size(st.st_size)}  {modified}")
    return text


class ViewerScreen(ModalScreen):
    """Modal screen showing one image of a list at a time."""

    BINDINGS = [
        Binding("escape", "close", "Close", show=False),
        Binding("q", "close", "Close", show=False),
        Binding("left,h", "previous", "Previous"),
        Binding("right,l", "next", "Next"),
        Binding("home", "first", "First", show=False),
        Binding("end", "last", "Last", show=False),
    ]

    CSS = """
    ViewerScreen {
        align: center middle;
    }

    #viewer-container {
        width: 70;
        height: auto;
        background: $surface;
        border: solid $primary;
        padding: 1 2;
    }

    #viewer-title {
        text-align: center;
        text-style: bold;
        margin-bottom: 1;
    }

    #viewer-position {
        color: $text-muted;
        text-align: right;
    }
    """

    def __init__(self, paths: list[Path], current_path: Path | None = None) -> None:
        super().__init__()
        self.paths = paths
        self.current_index = 0
        if current_path is not None and current_path in paths:
            self.current_index = paths.index(current_path)

    @property
    def current_path(self) -> Path | None:
        if 0 <= self.current_index < len(self.paths):
            return self.paths[self.current_index]
        return None

    def compose(self) -> ComposeResult:
        with Vertical(id="viewer-container"):
            yield Static("VIEWER", id="viewer-title")
            yield Static(id="viewer-image")
            yield Static(id="viewer-position")

    def on_mount(self) -> None:
        self._show_current()

    def _show_current(self) -> None:
        image = self.query_one("#viewer-image", Static)
        position = self.query_one("#viewer-position", Static)
        path = self.current_path
        if path is None:
            image.update("No images")
            position.update("")
            return
        image.update(describe_image(path))
        position.update(f"{self.current_index + 1} / {len(self.paths)}")

    def _go(self, index: int) -> None:
        if 0 <= index < len(self.paths):
            self.current_index = index
            self._show_current()

    def action_previous(self) -> None:
        self._go(self.current_index - 1)

    def action_next(self) -> None:
        self._go(self.current_index + 1)

    def action_first(self) -> None:
        self._go(0)

    def action_last(self) -> None:
        self._go(len(self.paths) - 1)

    def action_close(self) -> None:
        self.dismiss(self.current_path)
