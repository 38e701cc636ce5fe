"""Defaults, file names and display constants."""

from __future__ import annotations

# -- configuration defaults ---------------------------------------------------

DEFAULT_POLL_INTERVAL_MS = 500
DEFAULT_MAX_HISTORY_ITEMS = 50
DEFAULT_MAX_PINS = 50
DEFAULT_MAX_ENTRY_LENGTH = 10000
DEFAULT_MAX_AGE_DAYS = 30
DEFAULT_CLEANUP_INTERVAL_SEC = 3600

# -- file names (relative to the home directory) ------------------------------

HISTORY_FILE = ".clipboard_history"
PINS_FILE = ".clipboard_pins"
CONFIG_FILE = ".clippy.yaml"
DATA_DIR = ".clippy_data"
IMAGES_DIR = "images"
BACKUP_SUFFIX = ".backup"

# -- permissions ----------------------------------------------------------------

FILE_MODE = 0o600
DIR_MODE = 0o700

# -- record content -----------------------------------------------------------

TRUNCATION_MARKER = "... [truncated]"
IMAGE_EXTENSION = ".png"
SECONDS_PER_DAY = 24 * 60 * 60


def image_placeholder(size: int) -> str:
    """Human-readable stand-in stored as an image record's content."""
    return f"[Image: {size} bytes]"


# -- display --------------------------------------------------------------------

PREVIEW_LENGTH = 60
DEFAULT_LIST_COUNT = 10
