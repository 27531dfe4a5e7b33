"""Settings persistence to JSON file."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import structlog

from lostfound.core.config import get_settings, reload_settings

logger = structlog.get_logger("lostfound.settings_persistence")


def get_settings_file_path() -> Path:
    """Get path to settings.json file."""
    settings = get_settings()
    return settings.config_dir / "settings.json"


def load_settings_file() -> dict[str, Any]:  # noqa: ANN001
    """Read settings.json as a dictionary.

    Returns an empty dict when the file is missing. Parse errors propagate so
    callers can decide whether to fall back to defaults.
    """
    settings_file = get_settings_file_path()
    if not settings_file.exists():
        return {}

    with settings_file.open("r") as f:
        data = json.load(f)

    if not isinstance(data, dict):
        raise ValueError(f"settings.json must contain an object, got {type(data).__name__}")
    return data


def save_settings_to_file(settings_dict: dict[str, Any]) -> None:  # noqa: ANN001
    """Save settings to settings.json file and reload settings.

    New keys are merged over whatever the file already holds.

    Args:
        settings_dict: Dictionary with settings to save.
    """
    settings_file = get_settings_file_path()

    try:
        settings_file.parent.mkdir(parents=True, exist_ok=True)

        existing = load_settings_file()
        existing.update(settings_dict)

        with settings_file.open("w") as f:
            json.dump(existing, f, indent=2)

        logger.info(
            "Settings saved to file",
            path=str(settings_file),
            settings=list(settings_dict.keys()),
        )

        reload_settings()

    except Exception as e:
        logger.error(
            "Failed to save settings to file",
            path=str(settings_file),
            error=str(e),
            exc_info=True,
        )
        raise
