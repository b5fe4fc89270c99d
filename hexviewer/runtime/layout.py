"""Terminal-to-pane geometry.

Splits the terminal into the hex pane (left), the ASCII pane (right) and the
one-row status bar, and derives how many grid rows fit inside the bordered
panes. Narrow or short terminals degrade to minimal sizes instead of raising.
"""

from __future__ import annotations

from dataclasses import dataclass

STATUS_ROWS = 1
BORDER_ROWS = 2


@dataclass(frozen=True)
class PaneGeometry:
    total_columns: int
    total_lines: int
    hex_width: int
    ascii_width: int
    visible_rows: int


def split_pane_widths(total_columns: int, hex_pane_percent: float) -> tuple[int, int]:
    """Return ``(hex_width, ascii_width)``; the hex pane gets at least one column."""
    total = max(1, total_columns)
    hex_width = int(total * hex_pane_percent / 100.0)
    hex_width = max(1, min(hex_width, total))
    return hex_width, total - hex_width


def compute_pane_geometry(total_columns: int, total_lines: int, hex_pane_percent: float) -> PaneGeometry:
    hex_width, ascii_width = split_pane_widths(total_columns, hex_pane_percent)
    visible_rows = max(1, total_lines - STATUS_ROWS - BORDER_ROWS)
    return PaneGeometry(
        total_columns=max(1, total_columns),
        total_lines=max(1, total_lines),
        hex_width=hex_width,
        ascii_width=ascii_width,
        visible_rows=visible_rows,
    )


def pane_inner_width(pane_width: int) -> int:
    """Return content columns inside a pane; panes under 2 columns have no border."""
    if pane_width >= 2:
        return pane_width - 2
    return max(0, pane_width)


def ascii_column_cap(ascii_width: int) -> int | None:
    """Return the most grid columns the ASCII pane can show, or None without a pane."""
    inner = pane_inner_width(ascii_width)
    if inner <= 0:
        return None
    return inner
