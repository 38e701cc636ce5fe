"""Clipboard history persistence store."""

from __future__ import annotations

from ..constants import TRUNCATION_MARKER, image_placeholder
from ..errors import PersistenceError
from ..log import logger
from ..models import ImageRecord, Record, TextRecord
from .records import RecordStore


class HistoryStore(RecordStore):
    """Captured clipboard items, most recent first.

    Holds at most ``config.max_history_items`` records; the oldest are
    evicted on insert. Text is deduplicated against the head only, so the
    same string can appear again once something else has been copied.
    Images are never deduplicated.
    """

    def truncate(self, text: str) -> str:
        limit = self.config.max_entry_length
        if len(text) > limit:
            return text[:limit] + TRUNCATION_MARKER
        return text

    def capture_text(self, raw: str) -> TextRecord | None:
        """Record copied text. Returns ``None`` when nothing was added."""
        if not raw:
            return None
        text = self.truncate(raw)
        history = self.load()
        head = history[0] if history else None
        if isinstance(head, TextRecord) and head.content == text:
            logger.debug("skipping duplicate of most recent entry")
            return None

        record = TextRecord(text, self.clock())
        self._insert(history, record)
        return record

    def capture_image(self, data: bytes) -> ImageRecord | None:
        """Store image bytes as a new blob and record it."""
        if not data:
            return None
        path = self.images.save(data)
        if path is None:
            raise PersistenceError(self.images.directory, "could not store image")

        record = ImageRecord(image_placeholder(len(data)), path, self.clock())
        try:
            self._insert(self.load(), record)
        except PersistenceError:
            self.images.delete(path)
            raise
        return record

    def _insert(self, history: list[Record], record: Record) -> None:
        history.insert(0, record)
        evicted: list[Record] = []
        while len(history) > self.config.max_history_items:
            evicted.append(history.pop())
        self.save(history)
        self._release_blobs(evicted)

    def recent(self, count: int | None = None) -> list[Record]:
        """Return the *count* most recent records (all when ``None``)."""
        history = self.load()
        return history if count is None else history[: max(0, count)]

    def clear(self) -> bool:
        """Delete the history file and every blob it references.

        Returns ``False`` if there was no history file.
        """
        history = self.load()
        existed = self.delete()
        self._release_blobs(history)
        return existed
