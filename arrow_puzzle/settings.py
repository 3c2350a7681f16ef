"""
Settings Module for Arrow Puzzle Solver

Solver preferences persisted as a JSON object in config.json (working
directory). Every known key has a default, and the default's type is the
only type accepted for that key when loading.
"""

import json
import logging
from pathlib import Path
from typing import Any, Dict, Optional

logger = logging.getLogger(__name__)

SETTINGS_FILE = Path("config.json")

DEFAULT_SETTINGS: Dict[str, Any] = {
    "debug_enabled": False,
    "strategy_name": "orientation_search",
    "max_workers": 4,
}


def _settings_path(path: Optional[Path]) -> Path:
    return SETTINGS_FILE if path is None else Path(path)


def _read_json(path: Path) -> Optional[Dict[str, Any]]:
    """Parse the file, or None if it is missing, unreadable or not an object."""
    if not path.exists():
        logger.debug(f"No settings file at {path}")
        return None

    try:
        raw = json.loads(path.read_text(encoding='utf-8'))
    except (json.JSONDecodeError, OSError) as e:
        logger.warning(f"Ignoring settings file {path}: {e}")
        return None

    if not isinstance(raw, dict):
        logger.warning(f"Ignoring settings file {path}: expected a JSON object, got {type(raw).__name__}")
        return None
    return raw


def _checked(raw: Dict[str, Any]) -> Dict[str, Any]:
    """
    Overlay raw values on the defaults, key by key.

    A value whose type differs from its default's is replaced by the
    default. bool and int are kept apart, so `true` is not a worker count.
    Unknown keys are dropped.
    """
    settings = DEFAULT_SETTINGS.copy()
    for key, value in raw.items():
        if key not in DEFAULT_SETTINGS:
            logger.debug(f"Unknown setting {key!r} ignored")
            continue
        expected = type(DEFAULT_SETTINGS[key])
        if type(value) is not expected:
            logger.warning(
                f"Setting {key!r} should be {expected.__name__}, got {value!r}; "
                f"using {DEFAULT_SETTINGS[key]!r}"
            )
            continue
        settings[key] = value
    return settings


def load_settings(path: Optional[Path] = None) -> Dict[str, Any]:
    """
    Load settings, falling back to the default for anything missing or malformed.

    Args:
        path: Settings file (SETTINGS_FILE if omitted)

    Returns:
        A fresh dict holding every key of DEFAULT_SETTINGS
    """
    path = _settings_path(path)
    raw = _read_json(path)
    if raw is None:
        return DEFAULT_SETTINGS.copy()

    settings = _checked(raw)
    logger.debug(f"Settings loaded from {path}: {settings}")
    return settings


def save_settings(settings: Dict[str, Any], path: Optional[Path] = None) -> None:
    """
    Write settings as indented JSON. Failures are logged, not raised.

    Args:
        settings: Settings dictionary to save
        path: Settings file (SETTINGS_FILE if omitted)
    """
    path = _settings_path(path)
    try:
        path.write_text(json.dumps(settings, indent=2), encoding='utf-8')
    except OSError as e:
        logger.error(f"Failed to save settings to {path}: {e}")
        return
    logger.debug(f"Settings saved to {path}")
