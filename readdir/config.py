"""Read-only JSON config with default flags and theme.

The file lives in the platform config directory. Missing or malformed config
falls back to built-in defaults; the tool never writes it.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path

from platformdirs import user_config_dir

from .flags import DisplayFlags

APP_NAME = "readdir"
CONFIG_FILENAME = "config.json"
CONFIG_PATH = Path(user_config_dir(APP_NAME, appauthor=False)) / CONFIG_FILENAME

logger = logging.getLogger(__name__)


def load_config() -> dict[str, object]:
    """Load the JSON config object.

    Returns an empty dict when the file is missing, unreadable, malformed, or
    does not decode to a top-level JSON object.
    """
    try:
        text = CONFIG_PATH.read_text(encoding="utf-8")
    except FileNotFoundError:
        return {}
    except OSError as exc:
        logger.warning("ignoring unreadable config %s: %s", CONFIG_PATH, exc)
        return {}
    try:
        data = json.loads(text)
    except ValueError as exc:
        logger.warning("ignoring malformed config %s: %s", CONFIG_PATH, exc)
        return {}
    return data if isinstance(data, dict) else {}


def load_default_flags() -> dict[str, bool]:
    """Return flag defaults from the ``flags`` object.

    Only known flag names with explicit boolean values are kept.
    """
    value = load_config().get("flags")
    if not isinstance(value, dict):
        return {}
    known = set(DisplayFlags.names())
    return {
        name: flag
        for name, flag in value.items()
        if name in known and isinstance(flag, bool)
    }


def load_theme_name() -> str | None:
    """Return the configured theme name, if it is a string."""
    value = load_config().get("theme")
    return value if isinstance(value, str) else None


__all__ = [
    "CONFIG_PATH",
    "load_config",
    "load_default_flags",
    "load_theme_name",
]
