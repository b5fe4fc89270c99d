"""Explicitly owned viewer session state.

One ``ViewerSession`` holds the buffer and the grid components for the
lifetime of the process. The loop and key handlers receive it by reference;
nothing here reads global state.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path

from ..grid import CursorModel, Direction, GridLayout, ViewportScroller, compute_layout, render_panes
from ..grid.cells import CellMatrix
from .layout import PaneGeometry, ascii_column_cap, compute_pane_geometry

logger = logging.getLogger(__name__)


def _grid_layout(geometry: PaneGeometry, buffer_len: int) -> GridLayout:
    # Both panes share one column count, so the narrower pane bounds it.
    return compute_layout(geometry.hex_width, buffer_len, max_columns=ascii_column_cap(geometry.ascii_width))


@dataclass
class ViewerSession:
    buffer: bytes
    path: Path
    hex_pane_percent: float
    geometry: PaneGeometry
    layout: GridLayout
    cursor: CursorModel
    scroller: ViewportScroller
    dirty: bool = True
    _last_size: tuple[int, int] = field(default=(0, 0), repr=False)

    @classmethod
    def create(
        cls,
        buffer: bytes,
        path: Path,
        *,
        term_columns: int,
        term_lines: int,
        hex_pane_percent: float,
    ) -> "ViewerSession":
        """Build a session positioned at offset 0 for the given terminal size."""
        geometry = compute_pane_geometry(term_columns, term_lines, hex_pane_percent)
        layout = _grid_layout(geometry, len(buffer))
        session = cls(
            buffer=buffer,
            path=path,
            hex_pane_percent=hex_pane_percent,
            geometry=geometry,
            layout=layout,
            cursor=CursorModel(len(buffer)),
            scroller=ViewportScroller(visible_rows=geometry.visible_rows),
            _last_size=(term_columns, term_lines),
        )
        session.reconcile()
        return session

    @property
    def buffer_len(self) -> int:
        return len(self.buffer)

    def reconcile(self) -> int:
        return self.scroller.reconcile(
            self.cursor.row(self.layout),
            self.layout,
            self.geometry.visible_rows,
        )

    def sync_geometry(self, term_columns: int, term_lines: int) -> bool:
        """Recompute layout for the current terminal size.

        Returns whether pane geometry changed; the window is reconciled either
        way so the cursor stays visible.
        """
        if (term_columns, term_lines) == self._last_size:
            self.reconcile()
            return False
        self._last_size = (term_columns, term_lines)
        geometry = compute_pane_geometry(term_columns, term_lines, self.hex_pane_percent)
        layout = _grid_layout(geometry, self.buffer_len)
        changed = geometry != self.geometry or layout != self.layout
        self.geometry = geometry
        if layout != self.layout:
            logger.debug(
                "grid relayout: %d columns x %d rows (%dx%d terminal)",
                layout.columns,
                layout.rows,
                term_columns,
                term_lines,
            )
        self.layout = layout
        self.reconcile()
        if changed:
            self.dirty = True
        return changed

    def apply_direction(self, direction: Direction) -> bool:
        """Move the cursor and repair the scroll window.

        Returns whether the cursor offset changed.
        """
        previous = self.cursor.offset
        self.cursor.move(direction, self.layout)
        self.reconcile()
        if self.cursor.offset == previous:
            return False
        self.dirty = True
        return True

    def visible_cells(self) -> tuple[CellMatrix, CellMatrix]:
        return render_panes(self.buffer, self.layout, self.cursor, self.scroller)

    def progress_ratio(self) -> float:
        if self.buffer_len == 0:
            return 0.0
        return (self.cursor.offset + 1) / self.buffer_len

    def counter_label(self) -> str:
        if self.buffer_len == 0:
            return "0/0 bytes"
        return f"{self.cursor.offset + 1}/{self.buffer_len} bytes"
