"""Persistent window and generator preferences for the pygame client."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Dict

logger = logging.getLogger(__name__)

_SETTINGS_PATH = Path(__file__).resolve().parent / "user_settings.json"

DEFAULT_USER_SETTINGS: Dict[str, Any] = {
    "cell_size": 24,
    "model": "gemini-2.5-flash",
}


def load_user_settings() -> Dict[str, Any]:
    """Return stored preferences merged over the defaults."""
    settings = dict(DEFAULT_USER_SETTINGS)
    try:
        with _SETTINGS_PATH.open("r", encoding="utf-8") as handle:
            data = json.load(handle)
    except FileNotFoundError:
        return settings
    except (json.JSONDecodeError, OSError) as exc:
        logger.debug("Ignoring unreadable settings file %s: %s", _SETTINGS_PATH, exc)
        return settings
    if isinstance(data, dict):
        cell_size = data.get("cell_size")
        if isinstance(cell_size, int) and not isinstance(cell_size, bool) and cell_size >= 8:
            settings["cell_size"] = cell_size
        model = data.get("model")
        if isinstance(model, str) and model.strip():
            settings["model"] = model.strip()
    return settings


def save_user_settings(settings: Dict[str, Any]) -> None:
    """Persist preferences to disk; filesystem errors are not fatal."""
    try:
        _SETTINGS_PATH.parent.mkdir(parents=True, exist_ok=True)
        with _SETTINGS_PATH.open("w", encoding="utf-8") as handle:
            json.dump(settings, handle, indent=2, sort_keys=True)
    except OSError as exc:
        logger.debug("Could not save settings to %s: %s", _SETTINGS_PATH, exc)


__all__ = ["DEFAULT_USER_SETTINGS", "load_user_settings", "save_user_settings"]
