"""Command-line front door for hexviewer.

Parses CLI options, loads the target file into memory, and dispatches into
the interactive viewer runtime.
"""

from __future__ import annotations

import argparse
import logging
from pathlib import Path

from . import logging_setup
from .buffer import BufferLoadError, read_buffer
from .runtime import run_viewer
from .ui_theme import available_theme_names

logger = logging.getLogger(__name__)


def _positive_int(value: str) -> int:
    """argparse type for positive integer values."""
    try:
        parsed = int(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"invalid integer value: {value!r}") from exc
    if parsed <= 0:
        raise argparse.ArgumentTypeError("value must be >= 1")
    return parsed


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="hexviewer",
        description="Browse the raw bytes of a file in synchronized hex and ASCII panes.",
    )
    parser.add_argument("path", help="Path to the file to inspect.")
    parser.add_argument(
        "--theme",
        default=None,
        help=f"UI theme name ({', '.join(available_theme_names())}).",
    )
    parser.add_argument("--no-color", action="store_true", help="Disable color output even on TTY.")
    parser.add_argument("--nopager", action="store_true", help="Print a static hex dump instead of the viewer.")
    parser.add_argument(
        "--max-cols",
        type=_positive_int,
        default=None,
        help="Column width for --nopager output (default: terminal width).",
    )
    return parser


def main(argv: list[str] | None = None) -> None:
    """Parse CLI arguments and launch the viewer on one file.

    Unreadable targets exit with a non-zero status and a message; an empty
    file is valid and opens an empty grid.
    """
    args = build_parser().parse_args(argv)
    logging_setup.configure()

    path = Path(args.path)
    try:
        buffer = read_buffer(path)
    except BufferLoadError as exc:
        logger.error("startup failed: %s", exc)
        raise SystemExit(str(exc)) from exc

    run_viewer(
        buffer,
        path,
        no_color=args.no_color,
        nopager=args.nopager,
        theme_name=args.theme,
        max_cols=args.max_cols,
    )


if __name__ == "__main__":
    main()
