"""Key dispatch for the viewer session."""

from __future__ import annotations

from ..grid import Direction
from ..runtime.session import ViewerSession

QUIT_KEYS = frozenset({"q"})

KEY_DIRECTIONS: dict[str, Direction] = {
    "LEFT": Direction.LEFT,
    "RIGHT": Direction.RIGHT,
    "UP": Direction.UP,
    "DOWN": Direction.DOWN,
}


def handle_key(key: str, session: ViewerSession) -> bool:
    """Apply one key token to ``session``; return True when the viewer should quit.

    Keys without a binding are consumed without effect.
    """
    if key in QUIT_KEYS:
        return True
    direction = KEY_DIRECTIONS.get(key)
    if direction is not None:
        session.apply_direction(direction)
    return False
