"""Windowed cursor model shared by every list screen.

Tracks a visible window over ``count`` items plus an optional cursor and mark.
All transitions are pure state updates and clamp back into range, so callers
never have to validate indices themselves.
"""

from __future__ import annotations

from dataclasses import dataclass

NO_INDEX = -1


@dataclass
class WindowedListModel:
    """Scrollable window with optional row cursor and range mark.

    ``first``/``last`` are inclusive window bounds. With ``cursor_enabled``
    false the model only scrolls (diff text); otherwise the cursor selects a
    row and the window follows it.
    """

    count: int = 0
    first: int = 0
    last: int = 0
    height: int = 0
    cursor: int = NO_INDEX
    marked: int = NO_INDEX
    cursor_enabled: bool = True

    @classmethod
    def create(cls, count: int, cursor_enabled: bool = True, height: int = 0) -> WindowedListModel:
        """Build an initialized model, applying ``height`` when already known."""
        model = cls()
        model.init(count, cursor_enabled)
        if height > 0:
            model.set_height(height)
        return model

    def init(self, count: int, cursor_enabled: bool) -> None:
        self.count = max(0, count)
        self.cursor_enabled = cursor_enabled
        self.cursor = 0 if cursor_enabled and self.count > 0 else NO_INDEX
        self.marked = NO_INDEX
        self.first = 0
        self.last = 0
        if self.height > 0:
            self._place_window(0)

    def window_size(self) -> int:
        """Number of rows the window covers: ``min(height, count)``."""
        return max(0, min(self.height, self.count))

    def visible_indices(self) -> range:
        """Item indices inside the current window, in display order."""
        if self.count == 0 or self.height <= 0:
            return range(0)
        return range(self.first, self.last + 1)

    def _place_window(self, first: int) -> None:
        """Move the window top to ``first``, clamped so it never leaves ``[0, count)``."""
        if self.count == 0:
            self.first = 0
            self.last = 0
            return
        size = max(1, self.window_size())
        first = max(0, min(first, self.count - size))
        self.first = first
        self.last = first + size - 1

    def _follow_cursor(self) -> None:
        """Shift the window the minimum amount needed to show the cursor."""
        if self.cursor == NO_INDEX:
            return
        if self.cursor > self.last:
            self._place_window(self.first + (self.cursor - self.last))
        elif self.cursor < self.first:
            self._place_window(self.cursor)

    def _clamp_cursor(self) -> None:
        if not self.cursor_enabled or self.count == 0:
            self.cursor = NO_INDEX
            return
        self.cursor = max(0, min(self.cursor, self.count - 1))

    def set_height(self, height: int) -> None:
        self.height = max(1, height)
        self._place_window(self.first)
        self._follow_cursor()

    def set_count(self, count: int) -> None:
        """Replace the item count in place, keeping the window where possible."""
        self.count = max(0, count)
        if self.cursor_enabled and self.cursor == NO_INDEX:
            self.cursor = 0
        self._clamp_cursor()
        if self.marked >= self.count:
            self.marked = NO_INDEX
        self._place_window(self.first)
        self._follow_cursor()

    def next_item(self) -> None:
        if self.count == 0:
            return
        if not self.cursor_enabled:
            if self.last < self.count - 1:
                self._place_window(self.first + 1)
            return
        if self.cursor < self.count - 1:
            self.cursor += 1
            self._follow_cursor()

    def prev_item(self) -> None:
        if self.count == 0:
            return
        if not self.cursor_enabled:
            if self.first > 0:
                self._place_window(self.first - 1)
            return
        if self.cursor > 0:
            self.cursor -= 1
            self._follow_cursor()

    def next_page(self) -> None:
        self._shift_page(max(1, self.height))

    def prev_page(self) -> None:
        self._shift_page(-max(1, self.height))

    def _shift_page(self, offset: int) -> None:
        if self.count == 0:
            return
        self._place_window(self.first + offset)
        if self.cursor == NO_INDEX:
            return
        self.cursor = max(self.first, min(self.cursor + offset, self.last))

    def toggle_mark(self) -> None:
        """Mark the cursor row, or clear the mark when it is already there."""
        if self.cursor == NO_INDEX:
            return
        self.marked = NO_INDEX if self.marked == self.cursor else self.cursor


__all__ = ["NO_INDEX", "WindowedListModel"]
