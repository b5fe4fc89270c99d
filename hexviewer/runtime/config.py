"""Read-only JSON config helpers.

Holds UI preferences only: theme name and hex pane width percentage. The
viewer never writes this file and keeps no cursor or scroll state in it.
All access is defensive: malformed or missing config falls back safely.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path

from platformdirs import user_config_dir

APP_NAME = "hexviewer"
CONFIG_FILENAME = "config.json"
CONFIG_PATH = Path(user_config_dir(APP_NAME, appauthor=False)) / CONFIG_FILENAME

DEFAULT_HEX_PANE_PERCENT = 70.0
MIN_HEX_PANE_PERCENT = 20.0
MAX_HEX_PANE_PERCENT = 90.0

logger = logging.getLogger(__name__)


def load_config() -> dict[str, object]:
    """Load the JSON config object.

    Returns an empty dict when the file is missing, unreadable, malformed, or
    does not decode to a top-level JSON object.
    """
    try:
        data = json.loads(CONFIG_PATH.read_text(encoding="utf-8"))
    except FileNotFoundError:
        return {}
    except (OSError, ValueError) as exc:
        logger.warning("ignoring unreadable config %s: %s", CONFIG_PATH, exc)
        return {}
    return data if isinstance(data, dict) else {}


def load_theme_name() -> str | None:
    """Load configured UI theme name, returning ``None`` when unset/invalid."""
    value = load_config().get("theme")
    if not isinstance(value, str):
        return None
    stripped = value.strip()
    return stripped if stripped else None


def load_hex_pane_percent() -> float:
    """Return the hex pane share of the terminal width.

    Values outside the open interval ``(MIN_HEX_PANE_PERCENT,
    MAX_HEX_PANE_PERCENT)`` and non-numeric values (booleans included) fall
    back to ``DEFAULT_HEX_PANE_PERCENT``.
    """
    value = load_config().get("hex_pane_percent")
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return DEFAULT_HEX_PANE_PERCENT
    if value <= MIN_HEX_PANE_PERCENT or value >= MAX_HEX_PANE_PERCENT:
        return DEFAULT_HEX_PANE_PERCENT
    return float(value)
