"""Fuzzy subsequence matching with ranking scores.

The query's characters must appear in the candidate in order
(case-insensitive), not necessarily next to each other. Each matched
character scores:

- 1 base point
- a streak bonus that grows by 2 for every further consecutive match
  (+2, +4, +6, ...)
- 10 when it is the first character of the candidate, otherwise 5 when
  the preceding character is whitespace or punctuation
- ``max(0, 50 - position)`` so earlier matches rank higher

Matching is greedy: each query character takes the first occurrence after
the previous match.
"""

from __future__ import annotations

import unicodedata
from typing import NamedTuple

START_BONUS = 10
BOUNDARY_BONUS = 5
STREAK_STEP = 2
POSITION_WINDOW = 50


class FuzzyMatch(NamedTuple):
    matches: bool
    score: int


NO_MATCH = FuzzyMatch(False, 0)


def _is_boundary(char: str) -> bool:
    return char.isspace() or unicodedata.category(char).startswith("P")


def fuzzy_match(query: str | None, candidate: str | None) -> FuzzyMatch:
    """Score *candidate* against *query*.

    An empty query matches everything with score 0; an empty candidate
    never matches a non-empty query. A query that is not fully consumed
    scores 0.
    """
    if not query:
        return FuzzyMatch(True, 0)
    if not candidate:
        return NO_MATCH

    pattern = query.lower()
    text = candidate.lower()

    qi = 0
    score = 0
    streak_bonus = 0
    last_match = -2
    for ti, char in enumerate(text):
        if qi == len(pattern):
            break
        if char != pattern[qi]:
            continue

        score += 1
        if ti == last_match + 1:
            streak_bonus += STREAK_STEP
            score += streak_bonus
        else:
            streak_bonus = 0

        if ti == 0:
            score += START_BONUS
        elif _is_boundary(text[ti - 1]):
            score += BOUNDARY_BONUS

        score += max(0, POSITION_WINDOW - ti)
        last_match = ti
        qi += 1

    if qi < len(pattern):
        return NO_MATCH
    return FuzzyMatch(True, score)
