"""Frame painter for the split hex/ASCII terminal view.

Turns the cell matrices from ``hexviewer.grid`` into a fully composed ANSI
frame: two bordered, titled panes side by side and a one-row status bar with
a progress gauge and a byte counter. Building the frame never mutates the
session; ``render_frame`` only adds the final write to stdout.
"""

from __future__ import annotations

import os
import sys
import unicodedata

from ..grid import CursorModel, PaneCell, ViewportScroller, compute_layout, render_panes
from ..runtime.layout import ascii_column_cap, pane_inner_width, split_pane_widths
from ..runtime.session import ViewerSession
from ..ui_theme import UITheme

HEX_TITLE = "Hex"
ASCII_TITLE = "ASCII"
HEX_SEPARATOR = " "
ASCII_SEPARATOR = ""

BORDER_TOP_LEFT = "┌"
BORDER_TOP_RIGHT = "┐"
BORDER_BOTTOM_LEFT = "└"
BORDER_BOTTOM_RIGHT = "┘"
BORDER_HORIZONTAL = "─"
BORDER_VERTICAL = "│"

CLEAR_SCREEN = "\033[H\033[J"


def _styled(text: str, sgr: str, theme: UITheme) -> str:
    if not text or not sgr:
        return text
    return f"{sgr}{text}{theme.reset}"


def terminal_safe(text: str) -> str:
    """Replace characters a terminal would act on or not draw with ``.``.

    Latin-1 bytes 0x80-0x9F map to C1 controls (CSI, OSC, NEL) and 0xAD is a
    zero-width format character; neither may reach the terminal raw.
    """
    if text.isascii():
        return text
    return "".join(
        "." if unicodedata.category(ch) in {"Cc", "Cf"} else ch
        for ch in text
    )


def compose_cell_row(cells: list[PaneCell], separator: str, width: int, theme: UITheme) -> str:
    """Join cells into exactly ``width`` visible columns.

    Cells that would overflow ``width`` are dropped whole; the rest of the row
    is space padded. The cursor cell is wrapped in the theme's cursor style.
    """
    out: list[str] = []
    used = 0
    for idx, cell in enumerate(cells):
        gap = separator if idx > 0 else ""
        needed = len(gap) + len(cell.text)
        if used + needed > width:
            break
        out.append(gap)
        text = terminal_safe(cell.text)
        out.append(_styled(text, theme.cursor, theme) if cell.highlighted else text)
        used += needed
    if used < width:
        out.append(" " * (width - used))
    return "".join(out)


def _border_line(pane_width: int, left: str, right: str, theme: UITheme, title: str = "") -> str:
    if pane_width <= 0:
        return ""
    if pane_width < 2:
        return _styled(BORDER_HORIZONTAL * pane_width, theme.border, theme)
    inner = pane_width - 2
    title_text = title[:inner]
    fill = BORDER_HORIZONTAL * (inner - len(title_text))
    return (
        _styled(left, theme.border, theme)
        + _styled(title_text, theme.title, theme)
        + _styled(fill + right, theme.border, theme)
    )


def _boxed(content: str, pane_width: int, theme: UITheme) -> str:
    if pane_width < 2:
        return content
    edge = _styled(BORDER_VERTICAL, theme.border, theme)
    return f"{edge}{content}{edge}"


def build_gauge(ratio: float, width: int, theme: UITheme) -> str:
    """Render a ``width``-column progress gauge with a centered percent label."""
    if width <= 0:
        return ""
    ratio = max(0.0, min(1.0, ratio))
    label = f"{round(ratio * 100)}%"[:width]
    chars = [" "] * width
    label_start = (width - len(label)) // 2
    for idx, ch in enumerate(label):
        chars[label_start + idx] = ch
    filled = round(ratio * width)
    if theme.gauge_fill_char != " ":
        for idx in range(filled):
            if chars[idx] == " ":
                chars[idx] = theme.gauge_fill_char
    text = "".join(chars)
    return _styled(text[:filled], theme.gauge_filled, theme) + _styled(text[filled:], theme.gauge_empty, theme)


def build_status_bar(
    ratio: float,
    counter: str,
    gauge_width: int,
    counter_width: int,
    theme: UITheme,
) -> str:
    """Render the gauge under the hex pane and the centered counter under the ASCII pane."""
    gauge = build_gauge(ratio, gauge_width, theme)
    if counter_width <= 0:
        return gauge
    label = counter[:counter_width]
    left_pad = (counter_width - len(label)) // 2
    right_pad = counter_width - len(label) - left_pad
    return f"{gauge}{' ' * left_pad}{_styled(label, theme.counter, theme)}{' ' * right_pad}"


def build_frame(session: ViewerSession, theme: UITheme) -> str:
    """Compose one complete frame for the current session state."""
    geometry = session.geometry
    hex_width = geometry.hex_width
    ascii_width = geometry.ascii_width
    hex_inner = pane_inner_width(hex_width)
    ascii_inner = pane_inner_width(ascii_width)
    hex_rows, ascii_rows = session.visible_cells()

    lines: list[str] = [
        _border_line(hex_width, BORDER_TOP_LEFT, BORDER_TOP_RIGHT, theme, HEX_TITLE)
        + _border_line(ascii_width, BORDER_TOP_LEFT, BORDER_TOP_RIGHT, theme, ASCII_TITLE)
    ]
    for hex_cells, ascii_cells in zip(hex_rows, ascii_rows):
        hex_text = compose_cell_row(hex_cells, HEX_SEPARATOR, hex_inner, theme)
        line = _boxed(hex_text, hex_width, theme)
        if ascii_width > 0:
            ascii_text = compose_cell_row(ascii_cells, ASCII_SEPARATOR, ascii_inner, theme)
            line += _boxed(ascii_text, ascii_width, theme)
        lines.append(line)
    lines.append(
        _border_line(hex_width, BORDER_BOTTOM_LEFT, BORDER_BOTTOM_RIGHT, theme)
        + _border_line(ascii_width, BORDER_BOTTOM_LEFT, BORDER_BOTTOM_RIGHT, theme)
    )
    lines.append(
        build_status_bar(
            session.progress_ratio(),
            session.counter_label(),
            hex_width,
            ascii_width,
            theme,
        )
    )
    # Rows past the terminal height would scroll the alternate screen.
    return CLEAR_SCREEN + "\r\n".join(lines[: geometry.total_lines])


def render_frame(session: ViewerSession, theme: UITheme, stdout_fd: int | None = None) -> None:
    """Write one frame for ``session`` to the terminal."""
    fd = sys.stdout.fileno() if stdout_fd is None else stdout_fd
    os.write(fd, build_frame(session, theme).encode("utf-8", errors="replace"))


def dump_lines(buffer: bytes, total_columns: int, hex_pane_percent: float) -> list[str]:
    """Return every grid row as ``OFFSET  HEX  ASCII`` plain text.

    Uses the same layout and cell matrices as the interactive view, sized for
    a terminal ``total_columns`` wide.
    """
    hex_width, ascii_width = split_pane_widths(total_columns, hex_pane_percent)
    layout = compute_layout(hex_width, len(buffer), max_columns=ascii_column_cap(ascii_width))
    if layout.rows == 0:
        return []
    cursor = CursorModel(len(buffer))
    scroller = ViewportScroller(visible_rows=layout.rows)
    hex_rows, ascii_rows = render_panes(buffer, layout, cursor, scroller)
    lines: list[str] = []
    for row, (hex_cells, ascii_cells) in enumerate(zip(hex_rows, ascii_rows)):
        hex_text = HEX_SEPARATOR.join(cell.text for cell in hex_cells)
        ascii_text = ASCII_SEPARATOR.join(terminal_safe(cell.text) for cell in ascii_cells if not cell.padding)
        lines.append(f"{row * layout.columns:08X}  {hex_text}  {ascii_text}")
    return lines


__all__ = [
    "ASCII_TITLE",
    "HEX_TITLE",
    "build_frame",
    "build_gauge",
    "build_status_bar",
    "compose_cell_row",
    "dump_lines",
    "render_frame",
    "terminal_safe",
]
