"""Persistent JSON config helpers.

Stores editor tunables: tab stop, quit confirmation count, and how long
status messages stay on screen. Malformed or missing config falls back to
defaults.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from pathlib import Path

from platformdirs import user_config_dir

from .rows import DEFAULT_TAB_STOP

logger = logging.getLogger(__name__)

APP_NAME = "lazyedit"
CONFIG_FILENAME = "config.json"
CONFIG_PATH = Path(user_config_dir(APP_NAME, appauthor=False)) / CONFIG_FILENAME

DEFAULT_QUIT_TIMES = 3
DEFAULT_MESSAGE_TIMEOUT_SECONDS = 5.0
MAX_TAB_STOP = 32


@dataclass(frozen=True)
class EditorSettings:
    """Tunables read once at startup."""

    tab_stop: int = DEFAULT_TAB_STOP
    quit_times: int = DEFAULT_QUIT_TIMES
    message_timeout_seconds: float = DEFAULT_MESSAGE_TIMEOUT_SECONDS


def load_config() -> dict[str, object]:
    """Load the persisted JSON config object.

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


def save_config(data: dict[str, object]) -> None:
    """Persist config data as pretty-printed JSON.

    Filesystem errors are logged and otherwise ignored.
    """
    try:
        CONFIG_PATH.parent.mkdir(parents=True, exist_ok=True)
        CONFIG_PATH.write_text(json.dumps(data, indent=2) + "\n", encoding="utf-8")
    except OSError as exc:
        logger.warning("could not write config %s: %s", CONFIG_PATH, exc)


def _coerce_int(value: object, default: int, low: int, high: int | None = None) -> int:
    """Accept real ints inside ``[low, high]``; booleans and anything else use ``default``."""
    if isinstance(value, bool) or not isinstance(value, int):
        return default
    if value < low or (high is not None and value > high):
        return default
    return value


def _coerce_positive_float(value: object, default: float) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return default
    if value <= 0:
        return default
    return float(value)


def load_settings() -> EditorSettings:
    """Build ``EditorSettings`` from config, dropping invalid values."""
    data = load_config()
    return EditorSettings(
        tab_stop=_coerce_int(data.get("tab_stop"), DEFAULT_TAB_STOP, 1, MAX_TAB_STOP),
        quit_times=_coerce_int(data.get("quit_times"), DEFAULT_QUIT_TIMES, 1),
        message_timeout_seconds=_coerce_positive_float(
            data.get("message_timeout_seconds"),
            DEFAULT_MESSAGE_TIMEOUT_SECONDS,
        ),
    )


def save_settings(settings: EditorSettings) -> None:
    """Persist ``settings`` while keeping unrelated keys already in the file."""
    config = load_config()
    config["tab_stop"] = settings.tab_stop
    config["quit_times"] = settings.quit_times
    config["message_timeout_seconds"] = settings.message_timeout_seconds
    save_config(config)
