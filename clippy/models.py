"""Clipboard records and their on-disk JSON shape.

A record is either a :class:`TextRecord` or an :class:`ImageRecord`.
Only image records carry a ``path``; the binary lives in that file and
``content`` holds a readable placeholder such as ``[Image: 2048 bytes]``.

On-disk format (one JSON object per record)::

    {"type": "text", "text": "...", "timestamp": 1700000000.0}
    {"type": "image", "text": "[Image: 2048 bytes]", "path": "...", "timestamp": ...}

Pins may also carry ``"label"``.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Any, Union


class RecordKind(str, Enum):
    TEXT = "text"
    IMAGE = "image"


@dataclass(frozen=True)
class TextRecord:
    content: str
    created_at: float | None = None
    label: str | None = None

    @property
    def kind(self) -> RecordKind:
        return RecordKind.TEXT


@dataclass(frozen=True)
class ImageRecord:
    content: str
    path: Path
    created_at: float | None = None
    label: str | None = None

    @property
    def kind(self) -> RecordKind:
        return RecordKind.IMAGE


Record = Union[TextRecord, ImageRecord]


def record_to_dict(record: Record) -> dict[str, Any]:
    """Serialize *record* to the persisted object shape."""
    data: dict[str, Any] = {"type": record.kind.value, "text": record.content}
    if record.created_at is not None:
        data["timestamp"] = record.created_at
    if isinstance(record, ImageRecord):
        data["path"] = str(record.path)
    if record.label:
        data["label"] = record.label
    return data


def record_from_dict(data: Any) -> Record | None:
    """Build a record from one persisted object, or ``None`` if unusable.

    Objects without ``type`` are text (older pin files never wrote it).
    An image object without a ``path`` degrades to text.
    """
    if not isinstance(data, dict):
        return None
    text = data.get("text")
    content = text if isinstance(text, str) else ""
    timestamp = data.get("timestamp")
    created_at = (
        float(timestamp)
        if isinstance(timestamp, (int, float)) and not isinstance(timestamp, bool)
        else None
    )
    label = data.get("label") if isinstance(data.get("label"), str) else None
    label = label or None

    path = data.get("path")
    if data.get("type") == RecordKind.IMAGE.value and isinstance(path, str) and path:
        return ImageRecord(content, Path(path), created_at, label)
    return TextRecord(content, created_at, label)


def records_from_json(raw: list) -> list[Record]:
    """Convert a loaded JSON array, skipping entries that aren't objects."""
    records = []
    for item in raw:
        record = record_from_dict(item)
        if record is not None:
            records.append(record)
    return records


def records_to_json(records: list[Record]) -> list[dict[str, Any]]:
    return [record_to_dict(r) for r in records]
