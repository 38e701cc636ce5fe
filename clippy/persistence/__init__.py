"""Persistence layer – each store owns its file path, data format, and I/O."""

from ._base import JsonStore
from .history import HistoryStore
from .images import ImageBlobStore
from .pins import PinStore
from .records import RecordStore

__all__ = [
    "HistoryStore",
    "ImageBlobStore",
    "JsonStore",
    "PinStore",
    "RecordStore",
]
