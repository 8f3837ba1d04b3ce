"""Entry list widget showing the filtered contents of the current directory."""

from datetime import datetime
from pathlib import Path

from rich.text import Text

from textual.app import ComposeResult
from textual.containers import Vertical
from textual.events import Key
from textual.message import Message
from textual.widgets import Input, Label, ListItem, ListView, Static

from ..listing import Entry
from ..sorting import SortOption


def format_size(size: int) -> str:
    """Human readable byte count."""
    value = float(size)
    for unit in ("B", "K", "M", "G"):
        if value < 1024 or unit == "G":
            if unit == "B":
                return f"{int(value)}{unit}"
            return f"{value:.1f}{unit}"
        value /= 1024
    return f"{value:.1f}G"


def format_entry(entry: Entry) -> Text:
    """Build the label for one entry: name, then size and date for images."""
    text = Text()
    if entry.is_directory:
        text.append(f"{entry.name}/", style="bold bright_blue")
        return text

    text.append(entry.name)
    modified = datetime.fromtimestamp(entry.mtime).strftime("%Y-%m-%d %H:%M")
    text.append(f"  {format_size(entry.size)}  {modified}", style="dim")
    return text


def format_sort_option(option: SortOption) -> str:
    arrow = "↓" if option.descending else "↑"
    return f"{option.key} {arrow}"


class EntryItem(ListItem):
    """A list item representing a directory entry."""

    def __init__(self, entry: Entry) -> None:
        super().__init__()
        self.entry = entry

    def compose(self) -> ComposeResult:
        yield Label(format_entry(self.entry))


class EntryList(Vertical):
    """Widget displaying directory entries with a query input."""

    DEFAULT_CSS = """
    EntryList {
        width: 1fr;
        height: 1fr;
    }

    EntryList > #entry-header {
        background: $primary-background;
        color: $accent;
        text-style: bold;
        padding: 0 1;
        height: 1;
    }

    EntryList > #query-input {
        height: 1;
        border: none;
        padding: 0 1;
        display: none;
    }

    EntryList > #query-input.visible {
        display: block;
    }

    EntryList > #entry-list-view {
        height: 1fr;
    }

    EntryList ListItem {
        padding: 0 1;
    }

    EntryList ListItem.--highlight {
        background: $accent;
    }
    """

    class EntryHighlighted(Message):
        """Message emitted when the cursor moves onto an entry."""

        def __init__(self, path: Path) -> None:
            super().__init__()
            self.path = path

    class EntryActivated(Message):
        """Message emitted when an entry is opened (Enter or click)."""

        def __init__(self, path: Path) -> None:
            super().__init__()
            self.path = path

    class QueryChanged(Message):
        """Message emitted when the query input text changes."""

        def __init__(self, value: str) -> None:
            super().__init__()
            self.value = value

    class QuerySubmitted(Message):
        """Message emitted when the query input is submitted."""

        pass

    def __init__(self, **kwargs) -> None:
        super().__init__(**kwargs)
        self._entries: list[Entry] = []

    def compose(self) -> ComposeResult:
        yield Static("ENTRIES", id="entry-header")
        yield Input(placeholder="Filter by name...", id="query-input")
        yield ListView(id="entry-list-view")

    @property
    def list_view(self) -> ListView:
        return self.query_one("#entry-list-view", ListView)

    @property
    def query_input(self) -> Input:
        return self.query_one("#query-input", Input)

    @property
    def entries(self) -> list[Entry]:
        return self._entries

    def update_entries(
        self,
        entries: list[Entry],
        selected_index: int | None,
        sort_option: SortOption,
        query: str = "",
    ) -> None:
        """Replace the displayed entries.

        Args:
            entries: Filtered entries in display order
            selected_index: Index to highlight, or None
            sort_option: Active sort option (shown in the header)
            query: Active query (shown in the header)
        """
        self._entries = entries
        list_view = self.list_view
        list_view.clear()

        header = self.query_one("#entry-header", Static)
        header_text = f"ENTRIES ({len(entries)}, {format_sort_option(sort_option)})"
        if query:
            header_text += f"  filter: {query}"
        header.update(header_text)

        for entry in entries:
            list_view.append(EntryItem(entry))

        if selected_index is not None and 0 <= selected_index < len(entries):
            list_view.index = selected_index

    def highlight_index(self, index: int | None) -> None:
        """Move the cursor without rebuilding the list."""
        if index is not None and 0 <= index < len(self._entries):
            self.list_view.index = index

    def on_list_view_highlighted(self, event: ListView.Highlighted) -> None:
        if event.item is not None and isinstance(event.item, EntryItem):
            self.post_message(self.EntryHighlighted(event.item.entry.path))

    def on_list_view_selected(self, event: ListView.Selected) -> None:
        """Handle Enter or click on an entry."""
        if event.item is not None and isinstance(event.item, EntryItem):
            self.post_message(self.EntryHighlighted(event.item.entry.path))
            self.post_message(self.EntryActivated(event.item.entry.path))

    def is_query_mode(self) -> bool:
        return self.query_input.has_class("visible")

    def enter_query_mode(self, value: str = "") -> None:
        """Show and focus the query input."""
        query_input = self.query_input
        query_input.add_class("visible")
        query_input.value = value
        query_input.focus()

    def exit_query_mode(self) -> None:
        """Hide the query input and return focus to the list."""
        query_input = self.query_input
        query_input.remove_class("visible")
        self.list_view.focus()

    def on_input_changed(self, event: Input.Changed) -> None:
        if event.input.id == "query-input":
            event.stop()
            self.post_message(self.QueryChanged(event.value))

    def on_input_submitted(self, event: Input.Submitted) -> None:
        """Commit the query and move focus to the results."""
        if event.input.id == "query-input":
            event.stop()
            self.post_message(self.QuerySubmitted())
            self.exit_query_mode()

    def on_key(self, event: Key) -> None:
        """Escape leaves query mode."""
        if self.is_query_mode() and event.key == "escape":
            self.exit_query_mode()
            event.stop()
