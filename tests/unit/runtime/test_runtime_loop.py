"""Event loop tests: repaint scheduling, key dispatch, and quit handling."""

from __future__ import annotations

from contextlib import contextmanager
from pathlib import Path
import unittest
from unittest import mock

from hexviewer.input import KEY_EOF
from hexviewer.runtime import run_main_loop
from hexviewer.runtime.session import ViewerSession
from hexviewer.runtime.terminal import TerminalController
from hexviewer.ui_theme import PLAIN_THEME


def _make_session(buffer: bytes = bytes(range(64))) -> ViewerSession:
    return ViewerSession.create(
        buffer,
        Path("/tmp/sample.bin"),
        term_columns=40,
        term_lines=8,
        hex_pane_percent=70.0,
    )


class _FakeTerminal:
    def __init__(self) -> None:
        self.entered = 0
        self.exited = 0

    @contextmanager
    def raw_mode(self):
        self.entered += 1
        try:
            yield
        finally:
            self.exited += 1


class RuntimeLoopBehaviorTests(unittest.TestCase):
    def _run(self, session: ViewerSession, keys: list[str], terminal=None, columns: int = 40, lines: int = 8):
        key_iter = iter(keys)
        frames: list[int] = []
        terminal = terminal if terminal is not None else _FakeTerminal()
        with mock.patch(
            "hexviewer.runtime.loop.shutil.get_terminal_size",
            return_value=mock.Mock(columns=columns, lines=lines),
        ), mock.patch(
            "hexviewer.runtime.loop.read_key",
            side_effect=lambda *_args, **_kwargs: next(key_iter),
        ), mock.patch(
            "hexviewer.runtime.loop.render_frame",
            side_effect=lambda s, _theme: frames.append(s.cursor.offset),
        ):
            run_main_loop(session, terminal, stdin_fd=0, theme=PLAIN_THEME)  # type: ignore[arg-type]
        return frames, terminal

    def test_quit_key_returns_inside_raw_mode(self) -> None:
        session = _make_session()

        frames, terminal = self._run(session, ["q"])

        self.assertEqual(frames, [0])
        self.assertEqual(terminal.entered, 1)
        self.assertEqual(terminal.exited, 1)

    def test_arrow_keys_move_cursor_and_trigger_repaint(self) -> None:
        session = _make_session()
        columns = session.layout.columns

        frames, _terminal = self._run(session, ["RIGHT", "DOWN", "q"])

        self.assertEqual(frames, [0, 1, 1 + columns])
        self.assertEqual(session.cursor.offset, 1 + columns)

    def test_timeouts_and_unbound_keys_do_not_repaint(self) -> None:
        session = _make_session()

        frames, _terminal = self._run(session, ["", "x", "ESC", "ENTER_CR", "LEFT", "q"])

        self.assertEqual(frames, [0])
        self.assertEqual(session.cursor.offset, 0)

    def test_closed_stdin_ends_loop_and_restores_terminal(self) -> None:
        session = _make_session()

        frames, terminal = self._run(session, ["RIGHT", KEY_EOF])

        self.assertEqual(frames, [0, 1])
        self.assertEqual(terminal.exited, 1)

    def test_resize_between_keys_repaints_with_new_layout(self) -> None:
        session = _make_session(bytes(300))

        frames, _terminal = self._run(session, ["q"], columns=100, lines=20)

        self.assertEqual(frames, [0])
        self.assertEqual(session.geometry.hex_width, 70)
        self.assertEqual(session.layout.columns, 23)
        self.assertEqual(session.geometry.visible_rows, 17)

    def test_real_terminal_controller_restores_tty_on_quit(self) -> None:
        session = _make_session()
        writes: list[bytes] = []

        with mock.patch("hexviewer.runtime.terminal.termios.tcgetattr", return_value=[0]), mock.patch(
            "hexviewer.runtime.terminal.tty.setraw"
        ), mock.patch("hexviewer.runtime.terminal.termios.tcsetattr") as setattr_mock, mock.patch(
            "hexviewer.runtime.terminal.os.write",
            side_effect=lambda _fd, data: writes.append(data) or len(data),
        ):
            terminal = TerminalController(stdin_fd=0, stdout_fd=1)
            self._run(session, ["q"], terminal=terminal)

        self.assertEqual(writes, [b"\x1b[?1049h\x1b[?25l", b"\x1b[?25h\x1b[?1049l"])
        setattr_mock.assert_called_once()


if __name__ == "__main__":
    unittest.main()
