"""Byte-grid navigation and dual-pane cell rendering.

Everything here is terminal-agnostic: layout math, cursor movement, scroll
window reconciliation and the hex/ASCII cell matrices consumed by the frame
painter in ``hexviewer.render``.
"""

from __future__ import annotations

from .cells import CellMatrix, PaneCell, ascii_text, hex_text, render_panes
from .cursor import CursorModel, Direction
from .layout import GridLayout, compute_layout
from .scroller import ViewportScroller

__all__ = [
    "CellMatrix",
    "CursorModel",
    "Direction",
    "GridLayout",
    "PaneCell",
    "ViewportScroller",
    "ascii_text",
    "compute_layout",
    "hex_text",
    "render_panes",
]
