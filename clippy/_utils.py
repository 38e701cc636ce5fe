"""Display helpers shared by the CLI and the picker."""

from __future__ import annotations

from datetime import datetime, timedelta

from .constants import PREVIEW_LENGTH


def format_timestamp(timestamp: float | None, now: datetime | None = None) -> str:
    """Render a capture time relative to *now* (local time).

    ``Today 14:03:22``, ``Yesterday 09:15``, otherwise ``Mar 4 18:40``.
    """
    if timestamp is None:
        return "unknown"
    when = datetime.fromtimestamp(timestamp)
    today = (now or datetime.now()).date()
    if when.date() == today:
        return f"Today {when:%H:%M:%S}"
    if when.date() == today - timedelta(days=1):
        return f"Yesterday {when:%H:%M}"
    return f"{when:%b} {when.day} {when:%H:%M}"


def preview_text(text: str, length: int = PREVIEW_LENGTH) -> str:
    """Single-line preview: newlines shown as ``↵``, cut at *length*."""
    text = text.replace("\n", "↵").replace("\r", "")
    if len(text) <= length:
        return text
    return text[:length] + "..."
