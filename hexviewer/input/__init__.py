"""Input-layer public API for key decoding and dispatch."""

from .reader import ESC_SEQUENCE_TIMEOUT_MS, KEY_EOF, _PENDING_BYTES, read_key
from .keys import KEY_DIRECTIONS, QUIT_KEYS, handle_key

__all__ = [
    "read_key",
    "_PENDING_BYTES",
    "ESC_SEQUENCE_TIMEOUT_MS",
    "KEY_EOF",
    "KEY_DIRECTIONS",
    "QUIT_KEYS",
    "handle_key",
]
