"""Byte-grid geometry for the hex and ASCII panes.

Each byte takes two hex digits plus one separator in the hex pane, so the
column count follows from the hex pane width. The ASCII pane reuses the same
column count to keep both panes row-aligned.
"""

from __future__ import annotations

from dataclasses import dataclass

HEX_CELL_WIDTH = 3
MIN_VIEWPORT_WIDTH = 4


@dataclass(frozen=True)
class GridLayout:
    """Column/row arrangement of the buffer for one viewport width."""

    columns: int
    rows: int

    def row_of(self, offset: int) -> int:
        return offset // self.columns


def compute_layout(viewport_width: int, buffer_len: int, max_columns: int | None = None) -> GridLayout:
    """Derive grid columns and rows from hex pane width and buffer length.

    Widths narrower than ``MIN_VIEWPORT_WIDTH`` clamp to a single column so
    resize transients never divide by zero. ``max_columns`` caps the result
    when the ASCII pane is too narrow to show every column.
    """
    if viewport_width < MIN_VIEWPORT_WIDTH:
        columns = 1
    else:
        columns = max(1, (viewport_width - 1) // HEX_CELL_WIDTH)
    if max_columns is not None:
        columns = max(1, min(columns, max_columns))
    rows = -(-max(0, buffer_len) // columns)
    return GridLayout(columns=columns, rows=rows)


__all__ = ["GridLayout", "HEX_CELL_WIDTH", "MIN_VIEWPORT_WIDTH", "compute_layout"]
