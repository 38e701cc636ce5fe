"""Age-based expiry of records."""

from __future__ import annotations

import time
from collections.abc import Iterable

from .constants import SECONDS_PER_DAY
from .models import Record


def is_expired(record: Record, max_age_seconds: float, now: float) -> bool:
    """True if *record* is older than *max_age_seconds*.

    Records without a timestamp never expire.
    """
    if record.created_at is None:
        return False
    return now - record.created_at > max_age_seconds


def sweep(
    records: Iterable[Record], max_age_days: int, now: float | None = None
) -> tuple[list[Record], list[Record]]:
    """Split *records* into ``(kept, removed)`` by age, preserving order."""
    now = time.time() if now is None else now
    max_age_seconds = max_age_days * SECONDS_PER_DAY
    kept: list[Record] = []
    removed: list[Record] = []
    for record in records:
        (removed if is_expired(record, max_age_seconds, now) else kept).append(record)
    return kept, removed
