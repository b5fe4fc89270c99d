"""Cursor position over the byte buffer."""

from __future__ import annotations

from enum import Enum

from .layout import GridLayout


class Direction(Enum):
    LEFT = "left"
    RIGHT = "right"
    UP = "up"
    DOWN = "down"


class CursorModel:
    """Own the selected byte offset and clamp directional moves.

    Moves never wrap. ``DOWN`` clamps to the last byte rather than to the same
    column of a shorter final row. An empty buffer keeps ``offset`` at 0 and
    ignores all moves.
    """

    def __init__(self, buffer_len: int, offset: int = 0) -> None:
        self.buffer_len = max(0, buffer_len)
        self.offset = self.clamp(offset)

    @property
    def last_offset(self) -> int:
        return max(0, self.buffer_len - 1)

    def clamp(self, offset: int) -> int:
        return max(0, min(offset, self.last_offset))

    def row(self, layout: GridLayout) -> int:
        return layout.row_of(self.offset)

    def move(self, direction: Direction, layout: GridLayout) -> int:
        """Apply one move and return the new offset.

        Viewport reconciliation is left to the caller.
        """
        if self.buffer_len == 0:
            return self.offset

        columns = layout.columns
        if direction is Direction.LEFT:
            self.offset = max(self.offset - 1, 0)
        elif direction is Direction.RIGHT:
            self.offset = min(self.offset + 1, self.last_offset)
        elif direction is Direction.DOWN:
            # Clamps to the last byte, so Down on the row above a short final
            # row can land left of the current column.
            self.offset = min(self.offset + columns, self.last_offset)
        elif direction is Direction.UP:
            self.offset = self.offset - columns if self.offset >= columns else 0
        return self.offset


__all__ = ["CursorModel", "Direction"]
