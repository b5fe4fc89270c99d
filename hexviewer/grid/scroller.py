"""Visible row window over the byte grid.

The window follows a minimal-scroll rule: it moves only when the cursor row
falls outside it, and then only far enough to bring that row back to the
nearest edge. Afterwards ``window_start`` is clamped so the last page is
never shown with trailing empty rows when the grid is taller than the
window. The same rule covers cursor jumps, resizes that shrink the window,
and layout changes that alter the row count.
"""

from __future__ import annotations

from .layout import GridLayout


class ViewportScroller:
    """Own ``window_start`` and ``visible_rows`` for both panes."""

    def __init__(self, visible_rows: int = 1, window_start: int = 0) -> None:
        self.visible_rows = max(1, visible_rows)
        self.window_start = max(0, window_start)

    @property
    def window_end(self) -> int:
        """Return the last visible row index (inclusive)."""
        return self.window_start + self.visible_rows - 1

    def visible_range(self) -> range:
        return range(self.window_start, self.window_start + self.visible_rows)

    def reconcile(self, cursor_row: int, layout: GridLayout, visible_rows: int) -> int:
        """Repair the window so ``cursor_row`` is visible; return ``window_start``.

        Calling it again with unchanged inputs is a no-op.
        """
        self.visible_rows = max(1, visible_rows)
        if cursor_row < self.window_start:
            self.window_start = cursor_row
        elif cursor_row > self.window_end:
            self.window_start = cursor_row - self.visible_rows + 1
        max_start = max(0, layout.rows - self.visible_rows)
        self.window_start = max(0, min(self.window_start, max_start))
        return self.window_start


__all__ = ["ViewportScroller"]
