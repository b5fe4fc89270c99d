"""Main interactive event loop for the terminal UI.

Each iteration polls the terminal size, repaints when the session is dirty,
then waits briefly for one key and dispatches it. Resizes arrive through the
per-iteration size poll, never as events.
"""

from __future__ import annotations

import shutil

from ..input import KEY_EOF, handle_key, read_key
from ..render import render_frame
from ..ui_theme import UITheme
from .session import ViewerSession
from .terminal import TerminalController

DEFAULT_TERMINAL_SIZE = (80, 24)
KEY_POLL_TIMEOUT_MS = 100


def run_main_loop(
    session: ViewerSession,
    terminal: TerminalController,
    stdin_fd: int,
    theme: UITheme,
) -> None:
    """Run the interactive loop until a quit key is read or stdin closes."""
    with terminal.raw_mode():
        session.dirty = True
        while True:
            term = shutil.get_terminal_size(DEFAULT_TERMINAL_SIZE)
            session.sync_geometry(term.columns, term.lines)
            if session.dirty:
                render_frame(session, theme)
                session.dirty = False

            key = read_key(stdin_fd, timeout_ms=KEY_POLL_TIMEOUT_MS)
            if not key:
                continue
            if key == KEY_EOF:
                return
            if handle_key(key, session):
                return
