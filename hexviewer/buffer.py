"""Load the file under inspection into an immutable byte buffer."""

from __future__ import annotations

import logging
from pathlib import Path

logger = logging.getLogger(__name__)


class BufferLoadError(Exception):
    """Raised when the target path cannot be read as a regular file."""

    def __init__(self, path: Path, reason: str) -> None:
        super().__init__(f"{reason}: {path}")
        self.path = path
        self.reason = reason


def read_buffer(path: Path) -> bytes:
    """Read ``path`` fully into memory.

    Missing paths, directories and OS-level read failures raise
    ``BufferLoadError``; there is no empty-buffer fallback.
    """
    if not path.exists():
        raise BufferLoadError(path, "Path not found")
    if path.is_dir():
        raise BufferLoadError(path, "Not a file")
    try:
        data = path.read_bytes()
    except OSError as exc:
        logger.error("failed to read %s: %s", path, exc)
        raise BufferLoadError(path, exc.strerror or "Cannot read file") from exc
    logger.info("loaded %s (%d bytes)", path, len(data))
    return data


__all__ = ["BufferLoadError", "read_buffer"]
