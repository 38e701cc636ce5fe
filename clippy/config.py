"""Runtime configuration for the clipboard stores.

Loaded from ``~/.clippy.yaml``. Falls back to the built-in defaults if
the file doesn't exist or is invalid, key by key: a bad value for one
setting never discards the others.

Example file::

    max_history_items: 100
    max_pins: 20
    max_entry_length: 5000
    max_age_days: 14
"""

from __future__ import annotations

from dataclasses import dataclass, fields, replace
from pathlib import Path

import yaml

from .constants import (
    CONFIG_FILE,
    DATA_DIR,
    DEFAULT_CLEANUP_INTERVAL_SEC,
    DEFAULT_MAX_AGE_DAYS,
    DEFAULT_MAX_ENTRY_LENGTH,
    DEFAULT_MAX_HISTORY_ITEMS,
    DEFAULT_MAX_PINS,
    DEFAULT_POLL_INTERVAL_MS,
    HISTORY_FILE,
    IMAGES_DIR,
    PINS_FILE,
)
from .log import logger


@dataclass(frozen=True)
class ClippyConfig:
    """Limits consumed by the stores.

    ``poll_interval_ms`` and ``cleanup_interval_sec`` are carried for the
    clipboard watcher; the stores themselves never read them.
    """

    poll_interval_ms: int = DEFAULT_POLL_INTERVAL_MS
    max_history_items: int = DEFAULT_MAX_HISTORY_ITEMS
    max_pins: int = DEFAULT_MAX_PINS
    max_entry_length: int = DEFAULT_MAX_ENTRY_LENGTH
    max_age_days: int = DEFAULT_MAX_AGE_DAYS
    cleanup_interval_sec: int = DEFAULT_CLEANUP_INTERVAL_SEC


@dataclass(frozen=True)
class ClippyPaths:
    """Where the stores keep their files."""

    history: Path
    pins: Path
    images: Path

    @classmethod
    def from_home(cls, home: Path | None = None) -> ClippyPaths:
        home = home or Path.home()
        return cls(
            history=home / HISTORY_FILE,
            pins=home / PINS_FILE,
            images=home / DATA_DIR / IMAGES_DIR,
        )


def default_config_path() -> Path:
    return Path.home() / CONFIG_FILE


def _positive_int(value: object) -> int | None:
    # bool is an int subclass; "true" is not a count
    if isinstance(value, bool):
        return None
    try:
        number = int(value)  # type: ignore[call-overload]
    except (TypeError, ValueError):
        return None
    return number if number > 0 else None


def load_config(path: Path | None = None) -> ClippyConfig:
    """Load configuration from a YAML mapping at *path*.

    Unknown keys, non-integer and non-positive values are ignored.
    """
    path = path or default_config_path()
    config = ClippyConfig()
    if not path.exists():
        return config

    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    except (OSError, yaml.YAMLError):
        logger.warning("could not read config %s, using defaults", path, exc_info=True)
        return config
    if not isinstance(data, dict):
        logger.warning("config %s is not a mapping, using defaults", path)
        return config

    overrides: dict[str, int] = {}
    for f in fields(ClippyConfig):
        if f.name not in data:
            continue
        value = _positive_int(data[f.name])
        if value is None:
            logger.warning("ignoring invalid %s=%r in %s", f.name, data[f.name], path)
            continue
        overrides[f.name] = value
    return replace(config, **overrides)
