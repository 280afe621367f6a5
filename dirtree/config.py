"""Persistent JSON config helpers.

Stores the default traversal depth and the two row icons.
All access is defensive: malformed or missing config falls back safely.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path

from platformdirs import user_config_dir

from .render import DEFAULT_ICONS, Icons

logger = logging.getLogger(__name__)

APP_NAME = "dirtree"
CONFIG_FILENAME = "config.json"
CONFIG_PATH = Path(user_config_dir(APP_NAME, appauthor=False)) / CONFIG_FILENAME

DEFAULT_MAX_DEPTH = 2
MAX_DEPTH_LIMIT = 256


def load_config(path: Path | None = None) -> dict[str, object]:
    """Load the persisted JSON config object.

    Returns an empty dict when the file is missing, unreadable, malformed, or
    does not decode to a top-level JSON object.
    """
    config_path = CONFIG_PATH if path is None else path
    try:
        data = json.loads(config_path.read_text(encoding="utf-8"))
    except FileNotFoundError:
        return {}
    except (OSError, ValueError) as exc:
        logger.debug("ignoring unreadable config %s: %s", config_path, exc)
        return {}
    if not isinstance(data, dict):
        logger.debug("ignoring config %s: top level is not an object", config_path)
        return {}
    return data


def _coerce_depth(value: object) -> int | None:
    """Accept only real integers in ``[0, MAX_DEPTH_LIMIT]``."""
    if isinstance(value, bool) or not isinstance(value, int):
        return None
    if value < 0 or value > MAX_DEPTH_LIMIT:
        return None
    return value


def _coerce_icon(value: object) -> str | None:
    if not isinstance(value, str) or not value or "\n" in value:
        return None
    return value


def load_default_depth(data: dict[str, object] | None = None) -> int:
    """Return the configured default depth or ``DEFAULT_MAX_DEPTH``."""
    config = load_config() if data is None else data
    if "default_depth" not in config:
        return DEFAULT_MAX_DEPTH
    depth = _coerce_depth(config["default_depth"])
    if depth is None:
        logger.debug("ignoring invalid default_depth: %r", config["default_depth"])
        return DEFAULT_MAX_DEPTH
    return depth


def load_icons(data: dict[str, object] | None = None) -> Icons:
    """Return row icons, replacing any invalid configured glyph with its default.

    Identical glyphs fall back to ``DEFAULT_ICONS``.
    """
    config = load_config() if data is None else data
    directory = _coerce_icon(config.get("directory_icon")) or DEFAULT_ICONS.directory
    other = _coerce_icon(config.get("file_icon")) or DEFAULT_ICONS.other
    if directory == other:
        logger.debug("ignoring identical directory_icon and file_icon: %r", directory)
        return DEFAULT_ICONS
    return Icons(directory=directory, other=other)


__all__ = [
    "APP_NAME",
    "CONFIG_PATH",
    "DEFAULT_MAX_DEPTH",
    "MAX_DEPTH_LIMIT",
    "load_config",
    "load_default_depth",
    "load_icons",
]
