"""Dual-pane cell matrices for the visible window.

``render_panes`` is a pure read of buffer, layout, cursor and scroller state:
it never mutates them and returns the same matrices for the same inputs.
Both matrices always hold ``visible_rows x columns`` cells so the hex and
ASCII panes stay aligned row for row.
"""

from __future__ import annotations

from dataclasses import dataclass

from .cursor import CursorModel
from .layout import GridLayout
from .scroller import ViewportScroller

HEX_PADDING = "  "
ASCII_PADDING = " "
NON_PRINTABLE_GLYPH = "."


@dataclass(frozen=True)
class PaneCell:
    text: str
    highlighted: bool = False
    padding: bool = False


CellMatrix = list[list[PaneCell]]

_HEX_PAD_CELL = PaneCell(HEX_PADDING, padding=True)
_ASCII_PAD_CELL = PaneCell(ASCII_PADDING, padding=True)


def hex_text(value: int) -> str:
    return f"{value:02X}"


def ascii_text(value: int) -> str:
    """Return the glyph for one byte; ASCII control codes become ``.``."""
    if value < 0x20 or value == 0x7F:
        return NON_PRINTABLE_GLYPH
    return chr(value)


def render_panes(
    buffer: bytes,
    layout: GridLayout,
    cursor: CursorModel,
    scroller: ViewportScroller,
) -> tuple[CellMatrix, CellMatrix]:
    """Build ``(hex_matrix, ascii_matrix)`` for the rows in the scroll window.

    Cells past the end of the buffer are blank padding and never highlighted.
    """
    total = len(buffer)
    columns = layout.columns
    hex_rows: CellMatrix = []
    ascii_rows: CellMatrix = []
    for row in scroller.visible_range():
        hex_cells: list[PaneCell] = []
        ascii_cells: list[PaneCell] = []
        row_base = row * columns
        for col in range(columns):
            idx = row_base + col
            if idx >= total:
                hex_cells.append(_HEX_PAD_CELL)
                ascii_cells.append(_ASCII_PAD_CELL)
                continue
            value = buffer[idx]
            selected = idx == cursor.offset
            hex_cells.append(PaneCell(hex_text(value), highlighted=selected))
            ascii_cells.append(PaneCell(ascii_text(value), highlighted=selected))
        hex_rows.append(hex_cells)
        ascii_rows.append(ascii_cells)
    return hex_rows, ascii_rows


__all__ = [
    "ASCII_PADDING",
    "CellMatrix",
    "HEX_PADDING",
    "NON_PRINTABLE_GLYPH",
    "PaneCell",
    "ascii_text",
    "hex_text",
    "render_panes",
]
