"""Ranked fuzzy search across pins and history."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from .fuzzy import fuzzy_match
from .models import Record


@dataclass(frozen=True)
class SearchHit:
    record: Record
    index: int  # 1-based, within its own collection
    pinned: bool
    score: int


def score_record(query: str, record: Record) -> tuple[bool, int]:
    """Match *query* against a record's content and label; best score wins."""
    text = fuzzy_match(query, record.content)
    label = fuzzy_match(query, record.label)
    return text.matches or label.matches, max(text.score, label.score)


def search(
    query: str, history: Sequence[Record], pins: Sequence[Record] = ()
) -> list[SearchHit]:
    """Return matching records, best score first.

    Candidates are pins (pin order) followed by history (most recent
    first); equal scores keep that order.
    """
    hits: list[SearchHit] = []
    candidates = [(p, i, True) for i, p in enumerate(pins, 1)]
    candidates += [(h, i, False) for i, h in enumerate(history, 1)]
    for record, index, pinned in candidates:
        matches, score = score_record(query, record)
        if matches:
            hits.append(SearchHit(record, index, pinned, score))
    # sorted() is stable, so ties stay in candidate order
    return sorted(hits, key=lambda hit: hit.score, reverse=True)
