"""Banner widget with the title and the current location."""

from pathlib import Path

from rich.text import Text

from textual.app import ComposeResult
from textual.containers import Vertical
from textual.widgets import Static


def _build_title() -> Text:
    """Title with a small camera glyph, one color per letter."""
    colors = [
        "bright_cyan",
        "bright_green",
        "bright_yellow",
        "bright_magenta",
        "bright_red",
        "bright_cyan",
        "bright_green",
        "bright_yellow",
    ]
    text = Text()
    text.append("[◉]", style="bold bright_white")
    text.append(" ")
    for letter, color in zip("LIGHTBOX", colors):
        text.append(letter, style=f"bold {color}")
    text.append("  │  ", style="dim")
    text.append("Image Directory Browser", style="bright_white")
    return text


def build_location(
    directory: Path,
    history_index: int,
    history_length: int,
) -> Text:
    """Location line: directory plus position in the back/forward history."""
    text = Text()
    text.append(str(directory), style="bold")
    if history_length:
        text.append(f"  [{history_index + 1}/{history_length}]", style="dim")
    return text


class Banner(Vertical):
    """Application banner with title and location line."""

    DEFAULT_CSS = """
    Banner {
        width: 100%;
        height: 2;
        background: $primary-background;
        padding: 0 1;
    }

    Banner > Static {
        width: 100%;
        height: 1;
    }
    """

    def compose(self) -> ComposeResult:
        yield Static(_build_title(), id="banner-title")
        yield Static("", id="banner-location")

    def update_location(
        self,
        directory: Path,
        history_index: int,
        history_length: int,
    ) -> None:
        self.query_one("#banner-location", Static).update(
            build_location(directory, history_index, history_length)
        )
