"""Exceptions raised by the clipboard stores."""

from __future__ import annotations

from pathlib import Path


class ClippyError(Exception):
    """Base class for every error reported by the stores."""


class NotFoundError(ClippyError):
    """A 1-based index outside ``[1, size]``."""

    def __init__(self, index: int, size: int, what: str = "index") -> None:
        self.index = index
        self.size = size
        if size == 0:
            msg = f"Invalid {what} {index}. Collection is empty"
        else:
            msg = f"Invalid {what} {index}. Valid range: 1-{size}"
        super().__init__(msg)


class LimitReachedError(ClippyError):
    """The pin collection is full."""

    def __init__(self, limit: int) -> None:
        self.limit = limit
        super().__init__(f"Pin limit reached ({limit}). Unpin something first")


class AlreadyPinnedError(ClippyError):
    """An existing pin already has identical content."""

    def __init__(self, position: int) -> None:
        self.position = position
        super().__init__(f"This item is already pinned (#{position})")


class PersistenceError(ClippyError):
    """Writing a store file (or an image blob) failed."""

    def __init__(self, path: Path, reason: str = "write failed") -> None:
        self.path = path
        super().__init__(f"Failed to save {path}: {reason}")
