"""Persistent JSON config helpers.

Supplies defaults for title, theme, log level, and extra key mappings.
All access is defensive: malformed or missing config falls back safely.
"""

from __future__ import annotations

import json
from pathlib import Path

from platformdirs import user_config_dir

APP_NAME = "goat"
CONFIG_FILENAME = "config.json"
DEFAULT_CONFIG_PATH = Path(user_config_dir(APP_NAME, appauthor=False)) / CONFIG_FILENAME
CONFIG_PATH = DEFAULT_CONFIG_PATH


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


def _load_string(key: str) -> str | None:
    value = load_config().get(key)
    if not isinstance(value, str):
        return None
    stripped = value.strip()
    return stripped if stripped else None


def load_title() -> str | None:
    """Load the default frame title, returning ``None`` when unset/invalid."""
    return _load_string("title")


def load_theme_name() -> str | None:
    """Load persisted UI theme name, returning ``None`` when unset/invalid."""
    return _load_string("theme")


def load_log_level() -> str | None:
    return _load_string("log_level")


def load_mappings() -> list[str]:
    """Load raw mapping entries stored under ``mappings``.

    Non-list values are ignored entirely and non-string items are dropped.
    Entries are returned unvalidated; they go through the same parser as
    ``--mapping`` arguments.
    """
    value = load_config().get("mappings")
    if not isinstance(value, list):
        return []
    return [item for item in value if isinstance(item, str)]


__all__ = [
    "CONFIG_PATH",
    "DEFAULT_CONFIG_PATH",
    "load_config",
    "load_log_level",
    "load_mappings",
    "load_theme_name",
    "load_title",
]
