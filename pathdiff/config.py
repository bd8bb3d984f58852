"""Read-only user preferences stored as JSON.

Holds the preferred report theme and a colour opt-out.
All access is defensive: malformed or missing config falls back safely.
"""

from __future__ import annotations

import json
from pathlib import Path

from platformdirs import user_config_dir

APP_NAME = "pathdiff"
CONFIG_FILENAME = "config.json"
CONFIG_PATH = Path(user_config_dir(APP_NAME, appauthor=False)) / CONFIG_FILENAME


def load_config() -> dict[str, object]:
    """Load the persisted JSON config object.

    Returns an empty dict when the file is missing, unreadable, malformed, or
    does not decode to a top-level JSON object.
    """
    try:
        data = json.loads(CONFIG_PATH.read_text(encoding="utf-8"))
    except (OSError, ValueError):
        return {}
    return data if isinstance(data, dict) else {}


def load_theme_name() -> str | None:
    """Load preferred theme name, returning ``None`` when unset/invalid."""
    value = load_config().get("theme")
    if not isinstance(value, str):
        return None
    stripped = value.strip()
    return stripped if stripped else None


def load_no_color() -> bool:
    """Return the persisted colour opt-out.

    Only explicit boolean values are accepted; any other type falls back to
    ``False``.
    """
    value = load_config().get("no_color")
    return value if isinstance(value, bool) else False


__all__ = [
    "CONFIG_PATH",
    "load_config",
    "load_no_color",
    "load_theme_name",
]
