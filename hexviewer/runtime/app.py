"""Viewer bootstrap.

Resolves theme and pane preferences, then either prints a static dump (for
``--nopager`` or non-TTY stdin) or runs the interactive loop.
"""

from __future__ import annotations

import logging
import os
import shutil
import sys
from pathlib import Path

from ..render import dump_lines
from ..ui_theme import resolve_theme
from .config import load_hex_pane_percent, load_theme_name
from .loop import DEFAULT_TERMINAL_SIZE, run_main_loop
from .session import ViewerSession
from .terminal import TerminalController

logger = logging.getLogger(__name__)


def run_viewer(
    buffer: bytes,
    path: Path,
    no_color: bool = False,
    nopager: bool = False,
    theme_name: str | None = None,
    max_cols: int | None = None,
) -> None:
    """Show ``buffer`` interactively, or dump it when paging is not possible."""
    hex_pane_percent = load_hex_pane_percent()
    term = shutil.get_terminal_size(DEFAULT_TERMINAL_SIZE)

    if nopager or not os.isatty(sys.stdin.fileno()):
        columns = max_cols if max_cols is not None else term.columns
        logger.info("dumping %s at %d columns", path, columns)
        lines = dump_lines(buffer, columns, hex_pane_percent)
        sys.stdout.write("".join(f"{line}\n" for line in lines))
        return

    theme = resolve_theme(theme_name or load_theme_name(), no_color=no_color)
    session = ViewerSession.create(
        buffer,
        path,
        term_columns=term.columns,
        term_lines=term.lines,
        hex_pane_percent=hex_pane_percent,
    )
    logger.info("viewing %s (%d bytes) with theme %s", path, len(buffer), theme.name)
    stdin_fd = sys.stdin.fileno()
    terminal = TerminalController(stdin_fd=stdin_fd, stdout_fd=sys.stdout.fileno())
    run_main_loop(session, terminal, stdin_fd, theme)
