"""Listing action handlers for LightboxApp (sort, search, selection, open)."""

from __future__ import annotations

from ..widgets import EntryList


class EntryActionsMixin:
    """Mixin providing actions on the current listing."""

    def _change_sort(self, key: str) -> None:
        self.explorer.change_sort_key(key)
        self._refresh_entries()

    def action_sort_name(self) -> None:
        self._change_sort("name")

    def action_sort_size(self) -> None:
        self._change_sort("size")

    def action_sort_mtime(self) -> None:
        self._change_sort("mtime")

    def action_search(self) -> None:
        """Show the query input."""
        entry_list = self.query_one("#entry-list", EntryList)
        if not entry_list.is_query_mode():
            entry_list.enter_query_mode(self.explorer.query_input)

    def on_entry_list_query_changed(self, event: EntryList.QueryChanged) -> None:
        self.explorer.set_query_input(event.value)

    def on_entry_list_query_submitted(self, event: EntryList.QuerySubmitted) -> None:
        self.explorer.search()
        self._refresh_entries()

    def on_entry_list_entry_highlighted(self, event: EntryList.EntryHighlighted) -> None:
        self.explorer.select(event.path)

    def on_entry_list_entry_activated(self, event: EntryList.EntryActivated) -> None:
        """Enter a directory, or view an image."""
        self._remember_scroll()
        self.explorer.activate(event.path)

    def _move_selection(self, move) -> None:
        move()
        entry_list = self.query_one("#entry-list", EntryList)
        entry_list.highlight_index(self.explorer.selected_index)

    def action_select_first(self) -> None:
        self._move_selection(self.explorer.select_first)

    def action_select_last(self) -> None:
        self._move_selection(self.explorer.select_last)

    def action_select_previous(self) -> None:
        self._move_selection(self.explorer.select_previous)

    def action_select_next(self) -> None:
        self._move_selection(self.explorer.select_next)

    def action_view(self) -> None:
        """Open the viewer on the selection, or on the current directory."""
        path = self.explorer.selected_path or self.explorer.directory
        self.explorer.show_viewer(path)

    def action_open_directory(self) -> None:
        """Open the current directory in the OS file manager."""
        self.explorer.open_directory()

    def action_help(self) -> None:
        """Show help information."""
        self.notify(
            "b/f=Back/Forward, Backspace=Parent, ~=Home, /=Filter, 1/2/3=Sort name/size/date, "
            "v=View, o=Open, Ctrl+L=Path, r=Reload, q=Quit",
            timeout=5,
        )
