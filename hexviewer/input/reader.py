"""Low-level terminal input decoding.

Reads raw bytes from stdin and translates them into normalized key tokens.
Handles ESC-sequence timing so a lone Escape never waits for another key.
"""

from __future__ import annotations

import os
import select

ESC_SEQUENCE_TIMEOUT_MS = 25
KEY_EOF = "EOF"
_PENDING_BYTES: list[bytes] = []

_CONTROL_KEYS = {
    b"\t": "TAB",
    b"\x08": "BACKSPACE",
    b"\x7f": "BACKSPACE",
    b"\r": "ENTER_CR",
    b"\n": "ENTER_LF",
    b"\x03": "CTRL_C",
    b"\x04": "CTRL_D",
}

_ARROW_FINALS = {
    b"A": "UP",
    b"B": "DOWN",
    b"C": "RIGHT",
    b"D": "LEFT",
}


def _read_ready_byte(fd: int, timeout_ms: int) -> bytes | None:
    ready, _, _ = select.select([fd], [], [], max(0.0, timeout_ms / 1000.0))
    if not ready:
        return None
    ch = os.read(fd, 1)
    if not ch:
        return None
    return ch


def _drain_csi_parameters(fd: int, first: bytes) -> str:
    """Consume an unsupported CSI sequence so its tail is not read as keys."""
    part: bytes | None = first
    consumed = 0
    while part is not None and consumed < 16:
        if 0x40 <= part[0] <= 0x7E:
            return "ESC"
        part = _read_ready_byte(fd, ESC_SEQUENCE_TIMEOUT_MS)
        consumed += 1
    return "ESC"


def read_key(fd: int, timeout_ms: int | None = None) -> str:
    """Read one key token.

    Returns ``""`` when ``timeout_ms`` elapses without input and ``KEY_EOF``
    once the input stream is closed.
    """
    if _PENDING_BYTES:
        ch = _PENDING_BYTES.pop(0)
    else:
        if timeout_ms is not None:
            ready, _, _ = select.select([fd], [], [], max(0.0, timeout_ms / 1000.0))
            if not ready:
                return ""

        ch = os.read(fd, 1)
        if not ch:
            return KEY_EOF

    control = _CONTROL_KEYS.get(ch)
    if control is not None:
        return control

    if ch != b"\x1b":
        return ch.decode("utf-8", errors="replace")

    # Escape / arrow key sequences.
    seq = _read_ready_byte(fd, ESC_SEQUENCE_TIMEOUT_MS)
    if seq is None:
        return "ESC"
    if seq not in {b"[", b"O"}:
        _PENDING_BYTES.append(seq)
        return "ESC"
    final = _read_ready_byte(fd, ESC_SEQUENCE_TIMEOUT_MS)
    if final is None:
        return "ESC"
    arrow = _ARROW_FINALS.get(final)
    if arrow is not None:
        return arrow
    if seq == b"[":
        return _drain_csi_parameters(fd, final)
    return "ESC"
