"""Persistent JSON config helpers.

Stores listing defaults: extended-attribute mode and the report width used
when writing to a file. All access is defensive: malformed or missing config
falls back safely.
"""

from __future__ import annotations

import json
from pathlib import Path

from platformdirs import user_config_dir

APP_NAME = "minils"
CONFIG_FILENAME = "config.json"
CONFIG_PATH = Path(user_config_dir(APP_NAME, appauthor=False)) / CONFIG_FILENAME
DEFAULT_FILE_OUTPUT_WIDTH = 200


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


def save_config(data: dict[str, object]) -> None:
    """Persist config data as pretty-printed JSON.

    Filesystem errors are ignored so a read-only config location never breaks
    a listing.
    """
    try:
        CONFIG_PATH.parent.mkdir(parents=True, exist_ok=True)
        CONFIG_PATH.write_text(json.dumps(data, indent=2) + "\n", encoding="utf-8")
    except OSError:
        pass


def load_extended_default() -> bool:
    """Return persisted extended-mode preference.

    Only explicit boolean values are accepted; any other type falls back to
    ``False``.
    """
    value = load_config().get("extended")
    return value if isinstance(value, bool) else False


def save_extended_default(extended: bool) -> None:
    config = load_config()
    config["extended"] = bool(extended)
    save_config(config)


def load_file_output_width() -> int:
    """Load the fixed report width used for ``--output`` files."""
    value = load_config().get("file_width")
    if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
        return DEFAULT_FILE_OUTPUT_WIDTH
    return value
