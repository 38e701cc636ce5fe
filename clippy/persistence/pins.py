"""Pinned clipboard items persistence store."""

from __future__ import annotations

from ..errors import AlreadyPinnedError, LimitReachedError, PersistenceError
from ..models import ImageRecord, Record, TextRecord
from .records import RecordStore


class PinStore(RecordStore):
    """Items the user chose to keep, in the order they were pinned.

    Unlike history, pins are never evicted by count: once
    ``config.max_pins`` is reached further pins are rejected. Duplicate
    detection scans every pin, not just the newest one.
    """

    noun = "pin index"

    def promote(self, record: Record, label: str | None = None) -> int:
        """Pin a copy of *record*. Returns its 1-based position.

        Image records get their own copy of the blob so the pin outlives
        the history entry it came from.
        """
        pins = self.load()
        if len(pins) >= self.config.max_pins:
            raise LimitReachedError(self.config.max_pins)
        for position, pin in enumerate(pins, 1):
            if pin.content == record.content:
                raise AlreadyPinnedError(position)

        label = label or None
        now = self.clock()
        pin: Record
        if isinstance(record, ImageRecord):
            blob = self.images.copy(record.path)
            if blob is None:
                raise PersistenceError(self.images.directory, "could not copy image")
            pin = ImageRecord(record.content, blob, now, label)
        else:
            pin = TextRecord(record.content, now, label)

        pins.append(pin)
        try:
            self.save(pins)
        except PersistenceError:
            if isinstance(pin, ImageRecord):
                self.images.delete(pin.path)
            raise
        return len(pins)

    def unpin(self, index: int) -> Record:
        """Remove the pin at 1-based *index* and return it."""
        pins = self.load()
        removed = pins.pop(self._check_index(index, len(pins)) - 1)
        self.save(pins)
        self._release_blobs([removed])
        return removed
