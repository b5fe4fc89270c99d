"""Logging bootstrap for the viewer.

The TUI owns the terminal, so records never go to stderr. File logging is
opt-in through ``HEXVIEWER_LOG_LEVEL`` / ``HEXVIEWER_LOG_FILE``; otherwise the
``hexviewer`` logger gets a ``NullHandler``.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from logging.handlers import RotatingFileHandler
from pathlib import Path

from platformdirs import user_log_dir

APP_NAME = "hexviewer"
LOG_LEVEL_ENV = "HEXVIEWER_LOG_LEVEL"
LOG_FILE_ENV = "HEXVIEWER_LOG_FILE"
DEFAULT_LOG_PATH = Path(user_log_dir(APP_NAME, appauthor=False)) / f"{APP_NAME}.log"


@dataclass(frozen=True)
class LoggingRuntime:
    """Resolved runtime logging configuration."""

    level_name: str
    level: int
    file_path: Path | None


_RUNTIME: LoggingRuntime | None = None


def _parse_level(raw: str) -> tuple[str, int]:
    normalized = str(raw or "INFO").strip().upper()
    level = getattr(logging, normalized, logging.INFO)
    if not isinstance(level, int):
        level = logging.INFO
    return str(logging.getLevelName(level)), level


def _make_file_handler(level: int, file_path: Path) -> logging.Handler:
    handler = RotatingFileHandler(
        file_path,
        maxBytes=5 * 1024 * 1024,
        backupCount=3,
        encoding="utf-8",
    )
    handler.setLevel(level)
    handler.setFormatter(
        logging.Formatter(
            "%(asctime)s %(levelname)s %(name)s %(message)s",
            datefmt="%Y-%m-%dT%H:%M:%S",
        )
    )
    return handler


def configure(environ: dict[str, str] | None = None) -> LoggingRuntime:
    """Configure the ``hexviewer`` logger hierarchy.

    Idempotent: repeated calls return the originally configured runtime.
    """
    global _RUNTIME
    if _RUNTIME is not None:
        return _RUNTIME

    env = os.environ if environ is None else environ
    logger = logging.getLogger(APP_NAME)
    logger.propagate = False
    logger.handlers.clear()

    raw_level = env.get(LOG_LEVEL_ENV, "")
    raw_file = env.get(LOG_FILE_ENV, "")
    if not raw_level and not raw_file:
        logger.addHandler(logging.NullHandler())
        _RUNTIME = LoggingRuntime(level_name="NOTSET", level=logging.NOTSET, file_path=None)
        return _RUNTIME

    level_name, level = _parse_level(raw_level or "INFO")
    file_path = Path(raw_file) if raw_file else DEFAULT_LOG_PATH
    file_path.parent.mkdir(parents=True, exist_ok=True)
    logger.setLevel(level)
    logger.addHandler(_make_file_handler(level, file_path))

    _RUNTIME = LoggingRuntime(level_name=level_name, level=level, file_path=file_path)
    return _RUNTIME


def reset() -> None:
    """Drop configured handlers so ``configure`` can run again."""
    global _RUNTIME
    logger = logging.getLogger(APP_NAME)
    logger.setLevel(logging.NOTSET)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    _RUNTIME = None


__all__ = ["LoggingRuntime", "configure", "reset"]
