"""Record-level store shared by history and pins."""

from __future__ import annotations

import time
from collections.abc import Callable, Iterable
from pathlib import Path

from ..cleanup import sweep
from ..config import ClippyConfig
from ..errors import NotFoundError, PersistenceError
from ..models import ImageRecord, Record, records_from_json, records_to_json
from ._base import JsonStore
from .images import ImageBlobStore


class RecordStore(JsonStore):
    """Ordered list of :class:`~clippy.models.Record` in a JSON array file.

    Owns the image blobs its records reference: whenever a record leaves
    the collection its blob is deleted too.
    """

    #: Used in ``NotFoundError`` messages.
    noun = "index"

    def __init__(
        self,
        path: Path,
        images: ImageBlobStore,
        config: ClippyConfig,
        clock: Callable[[], float] = time.time,
    ) -> None:
        super().__init__(path)
        self.images = images
        self.config = config
        self.clock = clock

    def load(self) -> list[Record]:
        return records_from_json(self.load_raw())

    def save(self, records: list[Record]) -> None:
        """Persist *records*, raising :class:`PersistenceError` on failure."""
        if not self.save_raw(records_to_json(records)):
            raise PersistenceError(self.path)

    def get(self, index: int) -> Record:
        """Return the record at 1-based *index*."""
        records = self.load()
        return records[self._check_index(index, len(records)) - 1]

    def _check_index(self, index: int, size: int) -> int:
        if not 1 <= index <= size:
            raise NotFoundError(index, size, self.noun)
        return index

    def _release_blobs(self, records: Iterable[Record]) -> None:
        for record in records:
            if isinstance(record, ImageRecord):
                self.images.delete(record.path)

    def sweep(self, max_age_days: int | None = None) -> int:
        """Remove records older than *max_age_days* (config default).

        Returns the number removed. The file is only rewritten when
        something expired.
        """
        if max_age_days is None:
            max_age_days = self.config.max_age_days
        records = self.load()
        if not records:
            return 0
        kept, removed = sweep(records, max_age_days, now=self.clock())
        if removed:
            self.save(kept)
            self._release_blobs(removed)
        return len(removed)
