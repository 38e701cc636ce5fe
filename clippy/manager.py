"""ClipboardManager: one entry point over history, pins and search.

The CLI, the picker and any clipboard watcher talk to this class rather
than to the stores. Each instance carries its own configuration and file
locations, so several can coexist (e.g. in tests).
"""

from __future__ import annotations

import time
from collections.abc import Callable
from dataclasses import dataclass

from .config import ClippyConfig, ClippyPaths
from .log import logger
from .models import ImageRecord, Record, TextRecord
from .persistence import HistoryStore, ImageBlobStore, PinStore
from .search import SearchHit, search


@dataclass(frozen=True)
class CleanupResult:
    history_removed: int
    pins_removed: int

    @property
    def total(self) -> int:
        return self.history_removed + self.pins_removed


class ClipboardManager:
    """Clipboard history and pins stored under *paths*."""

    def __init__(
        self,
        config: ClippyConfig | None = None,
        paths: ClippyPaths | None = None,
        clock: Callable[[], float] = time.time,
    ) -> None:
        self.config = config or ClippyConfig()
        self.paths = paths or ClippyPaths.from_home()
        images = ImageBlobStore(self.paths.images)
        self.history = HistoryStore(self.paths.history, images, self.config, clock)
        self.pins = PinStore(self.paths.pins, images, self.config, clock)

    # -- capture ----------------------------------------------------------------

    def capture_text(self, text: str) -> TextRecord | None:
        return self.history.capture_text(text)

    def capture_image(self, data: bytes) -> ImageRecord | None:
        return self.history.capture_image(data)

    # -- history ----------------------------------------------------------------

    def list_history(self, count: int | None = None) -> list[Record]:
        return self.history.recent(count)

    def get_history(self, index: int) -> Record:
        return self.history.get(index)

    def clear(self) -> bool:
        """Delete all history (file, backup and image blobs)."""
        return self.history.clear()

    # -- pins -------------------------------------------------------------------

    def list_pins(self) -> list[Record]:
        return self.pins.load()

    def get_pin(self, index: int) -> Record:
        return self.pins.get(index)

    def pin(self, history_index: int, label: str | None = None) -> int:
        """Pin history item *history_index*. Returns the new pin's position."""
        return self.pins.promote(self.history.get(history_index), label)

    def unpin(self, index: int) -> Record:
        return self.pins.unpin(index)

    # -- search & maintenance ---------------------------------------------------

    def search(self, query: str) -> list[SearchHit]:
        return search(query, self.history.load(), self.pins.load())

    def cleanup(self) -> CleanupResult:
        """Drop history items and pins older than ``config.max_age_days``."""
        result = CleanupResult(self.history.sweep(), self.pins.sweep())
        if result.total:
            logger.info(
                "cleanup removed %d history, %d pins (older than %d days)",
                result.history_removed,
                result.pins_removed,
                self.config.max_age_days,
            )
        return result
