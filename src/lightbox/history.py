"""Back/forward history of visited directories."""

from dataclasses import dataclass
from pathlib import Path


@dataclass
class HistoryRecord:
    """One visited directory and its remembered scroll offset."""

    directory: Path
    scroll_top: float = 0


class HistoryStack:
    """Cursor-addressed history that discards the forward branch on push."""

    def __init__(self) -> None:
        self._records: list[HistoryRecord] = []
        self._index: int = -1

    @property
    def index(self) -> int:
        """Cursor position, -1 before the first navigation."""
        return self._index

    @property
    def current(self) -> HistoryRecord | None:
        """Record at the cursor, or None if nothing has been visited."""
        if 0 <= self._index < len(self._records):
            return self._records[self._index]
        return None

    def push(self, record: HistoryRecord) -> int:
        """Drop everything after the cursor, append a record and return its index."""
        del self._records[self._index + 1:]
        self._records.append(record)
        self._index = len(self._records) - 1
        return self._index

    def goto(self, index: int) -> HistoryRecord | None:
        """Move the cursor to an existing record. Out-of-range indexes are ignored."""
        if not 0 <= index < len(self._records):
            return None
        self._index = index
        return self._records[index]

    @property
    def can_go_back(self) -> bool:
        return self._index > 0

    @property
    def can_go_forward(self) -> bool:
        return self._index < len(self._records) - 1

    def back_index(self, offset: int = 0) -> int | None:
        """Index `offset + 1` steps back, or None if there is no such record."""
        if not self.can_go_back:
            return None
        target = self._index - 1 - offset
        if not 0 <= target < len(self._records):
            return None
        return target

    def forward_index(self, offset: int = 0) -> int | None:
        """Index `offset + 1` steps forward, or None if there is no such record."""
        if not self.can_go_forward:
            return None
        target = self._index + 1 + offset
        if not 0 <= target < len(self._records):
            return None
        return target

    def update_scroll_top(self, index: int, scroll_top: float) -> None:
        """Replace the scroll offset of one record without moving the cursor."""
        if 0 <= index < len(self._records):
            self._records[index].scroll_top = scroll_top

    @property
    def back_directories(self) -> list[Path]:
        """Directories before the cursor, nearest first."""
        if self._index <= 0:
            return []
        return [r.directory for r in reversed(self._records[:self._index])]

    @property
    def forward_directories(self) -> list[Path]:
        """Directories after the cursor, nearest first."""
        return [r.directory for r in self._records[self._index + 1:]]

    def clear(self) -> None:
        """Clear all history."""
        self._records.clear()
        self._index = -1

    def __len__(self) -> int:
        return len(self._records)
