"""Persistent JSON config helpers.

Stores the UI theme, deletion and sizing preferences, and the minimum tile
area. All access is defensive: malformed or missing config falls back safely.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from pathlib import Path

from platformdirs import user_config_dir

from ..treemap import DEFAULT_MIN_TILE_AREA

logger = logging.getLogger(__name__)

APP_NAME = "lazydisk"
CONFIG_FILENAME = "config.json"
CONFIG_PATH = Path(user_config_dir(APP_NAME, appauthor=False)) / CONFIG_FILENAME


@dataclass(frozen=True)
class Settings:
    """Effective preferences after merging config file and CLI flags."""

    theme: str | None = None
    use_trash: bool = False
    apparent_size: bool = False
    min_tile_area: float = DEFAULT_MIN_TILE_AREA


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


def _load_bool(data: dict[str, object], key: str) -> bool:
    """Only explicit booleans count; anything else is ``False``."""
    value = data.get(key)
    return value if isinstance(value, bool) else False


def _load_theme_name(data: dict[str, object]) -> str | None:
    value = data.get("theme")
    if not isinstance(value, str):
        return None
    stripped = value.strip()
    return stripped if stripped else None


def _load_min_tile_area(data: dict[str, object]) -> float:
    """Read a positive tile-area floor, rejecting booleans and non-numbers."""
    value = data.get("min_tile_area")
    if isinstance(value, bool) or not isinstance(value, (int, float)) or value <= 0:
        return DEFAULT_MIN_TILE_AREA
    return float(value)


def load_settings() -> Settings:
    """Read all preferences from the config file."""
    data = load_config()
    return Settings(
        theme=_load_theme_name(data),
        use_trash=_load_bool(data, "use_trash"),
        apparent_size=_load_bool(data, "apparent_size"),
        min_tile_area=_load_min_tile_area(data),
    )


__all__ = [
    "APP_NAME",
    "CONFIG_PATH",
    "Settings",
    "load_config",
    "load_settings",
]
