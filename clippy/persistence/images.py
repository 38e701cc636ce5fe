"""Image blob files referenced by image records."""

from __future__ import annotations

import os
import shutil
import uuid
from pathlib import Path

from ..constants import DIR_MODE, FILE_MODE, IMAGE_EXTENSION
from ..log import logger
from ._base import _atomic_write


class ImageBlobStore:
    """Directory of uniquely named image files (dir 700, files 600).

    The store that creates a blob is the only one that deletes it.
    """

    def __init__(self, directory: Path) -> None:
        self.directory = directory

    def ensure_dir(self) -> None:
        if not self.directory.exists():
            self.directory.mkdir(mode=DIR_MODE, parents=True, exist_ok=True)
        # mkdir's mode is filtered by the umask
        os.chmod(self.directory, DIR_MODE)

    def _new_path(self) -> Path:
        return self.directory / f"{uuid.uuid4().hex.upper()}{IMAGE_EXTENSION}"

    def save(self, data: bytes) -> Path | None:
        """Write *data* to a new blob. Returns its path, or ``None`` on failure."""
        if not data:
            return None
        try:
            self.ensure_dir()
            path = self._new_path()
            _atomic_write(path, data)
        except OSError:
            logger.error("failed to save image blob", exc_info=True)
            return None
        return path

    def copy(self, source: Path) -> Path | None:
        """Duplicate an existing blob into a new file this caller will own."""
        try:
            self.ensure_dir()
            path = self._new_path()
            shutil.copyfile(source, path)
            os.chmod(path, FILE_MODE)
        except OSError:
            logger.error("failed to copy image blob %s", source, exc_info=True)
            return None
        return path

    @staticmethod
    def delete(path: Path) -> bool:
        """Remove a blob file. A missing file counts as deleted."""
        try:
            path.unlink()
        except FileNotFoundError:
            logger.debug("image blob %s already gone", path)
        except OSError:
            logger.warning("failed to delete image blob %s", path, exc_info=True)
            return False
        return True
