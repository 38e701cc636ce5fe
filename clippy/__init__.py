"""Clipboard history store with pins, backup recovery and fuzzy search."""

from .config import ClippyConfig, ClippyPaths, load_config
from .errors import (
    AlreadyPinnedError,
    ClippyError,
    LimitReachedError,
    NotFoundError,
    PersistenceError,
)
from .manager import ClipboardManager
from .models import ImageRecord, Record, RecordKind, TextRecord

__version__ = "0.1.0"

__all__ = [
    "AlreadyPinnedError",
    "ClipboardManager",
    "ClippyConfig",
    "ClippyError",
    "ClippyPaths",
    "ImageRecord",
    "LimitReachedError",
    "NotFoundError",
    "PersistenceError",
    "Record",
    "RecordKind",
    "TextRecord",
    "load_config",
]
