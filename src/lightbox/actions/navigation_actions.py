"""Navigation action handlers for LightboxApp."""

from __future__ import annotations

from textual.widgets import Input

from ..widgets import EntryList


class NavigationActionsMixin:
    """Mixin providing directory navigation actions (back, forward, parent, home, path)."""

    def _remember_scroll(self) -> None:
        """Store the list's scroll offset in the current history record."""
        list_view = self.query_one("#entry-list", EntryList).list_view
        self.explorer.set_scroll_top(list_view.scroll_y)

    def action_back(self) -> None:
        """Go to the previous directory in history."""
        self._remember_scroll()
        self.explorer.back_directory()

    def action_forward(self) -> None:
        """Go to the next directory in history."""
        self._remember_scroll()
        self.explorer.forward_directory()

    def action_parent(self) -> None:
        self._remember_scroll()
        self.explorer.change_parent_directory()

    def action_home(self) -> None:
        self._remember_scroll()
        self.explorer.change_home_directory()

    def action_enter_selected(self) -> None:
        """Enter the selected entry if it is a directory."""
        self._remember_scroll()
        self.explorer.change_selected_directory()

    def action_reload(self) -> None:
        self._remember_scroll()
        self.explorer.reload()

    def action_edit_path(self) -> None:
        """Focus the path input."""
        path_input = self.query_one("#path-input", Input)
        path_input.value = self.explorer.directory_input
        path_input.focus()

    def on_input_changed(self, event: Input.Changed) -> None:
        if event.input.id == "path-input":
            self.explorer.set_directory_input(event.value)

    def on_input_submitted(self, event: Input.Submitted) -> None:
        """Navigate to the typed path."""
        if event.input.id != "path-input":
            return
        self._remember_scroll()
        self.explorer.set_directory_input(event.value)
        directory = self.explorer.directory
        self.explorer.submit_directory_input()
        if self.explorer.directory == directory:
            # Same directory: no reload, so put the list back in focus
            event.input.value = str(directory)
            self.query_one("#entry-list", EntryList).list_view.focus()
