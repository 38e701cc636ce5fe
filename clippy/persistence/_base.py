"""Base JSON-array persistence store.

Reads never fail: a missing file is an empty collection, a corrupt one is
recovered from its single-generation ``.backup`` copy when possible and
otherwise degraded to empty.

Writes copy the current file to ``.backup`` first, then atomically replace
the primary file (temp file in the same directory + ``os.replace``), so a
reader sees either the old or the new content and never a torn write.
Two processes saving at the same time are last-writer-wins; there is no
locking.
"""

from __future__ import annotations

import json
import os
import shutil
import tempfile
from pathlib import Path

from ..constants import BACKUP_SUFFIX, FILE_MODE
from ..log import logger


class JsonStore:
    """JSON array file with atomic write and backup recovery."""

    def __init__(self, path: Path) -> None:
        self.path = path

    @property
    def backup_path(self) -> Path:
        return self.path.with_name(self.path.name + BACKUP_SUFFIX)

    # -- core I/O -------------------------------------------------------------

    def load_raw(self) -> list:
        """Read the JSON array, falling back to the backup, then to ``[]``."""
        if not self.path.exists():
            return []

        data = self._read_array(self.path)
        if data is not None:
            return data

        logger.warning("%s is corrupted, trying backup %s", self.path, self.backup_path)
        if self.backup_path.exists():
            data = self._read_array(self.backup_path)
            if data is not None:
                logger.warning("recovered %s from backup", self.path)
                return data
        logger.warning("no usable backup for %s, starting empty", self.path)
        return []

    def save_raw(self, data: list) -> bool:
        """Write *data* as pretty-printed JSON. Returns ``False`` on failure.

        On failure the primary file is left exactly as it was.
        """
        if self.path.exists():
            self._write_backup()

        try:
            payload = json.dumps(data, indent=2, ensure_ascii=False).encode("utf-8")
        except (TypeError, ValueError):
            # ValueError covers lone surrogates that UTF-8 cannot encode.
            logger.error("failed to serialize %s", self.path, exc_info=True)
            return False

        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            _atomic_write(self.path, payload)
        except OSError:
            logger.error("failed to write %s", self.path, exc_info=True)
            return False
        return True

    def delete(self) -> bool:
        """Remove the primary file and its backup. Returns ``False`` if absent."""
        existed = self.path.exists()
        for p in (self.path, self.backup_path):
            try:
                p.unlink()
            except FileNotFoundError:
                pass
        return existed

    # -- helpers --------------------------------------------------------------

    @staticmethod
    def _read_array(path: Path) -> list | None:
        try:
            text = path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError):
            logger.debug("failed to read %s", path, exc_info=True)
            return None
        if not text.strip():
            return None
        try:
            data = json.loads(text)
        except (json.JSONDecodeError, RecursionError):
            logger.debug("invalid JSON in %s", path, exc_info=True)
            return None
        return data if isinstance(data, list) else None

    def _write_backup(self) -> None:
        try:
            shutil.copyfile(self.path, self.backup_path)
            os.chmod(self.backup_path, FILE_MODE)
        except OSError:
            # Not fatal: the primary write still goes ahead.
            logger.warning("failed to back up %s", self.path, exc_info=True)


def _atomic_write(path: Path, payload: bytes) -> None:
    """Replace *path* with *payload* in one step, mode 600."""
    fd, tmp_name = tempfile.mkstemp(prefix=f".{path.name}.", dir=str(path.parent))
    try:
        with os.fdopen(fd, "wb") as f:
            f.write(payload)
            f.flush()
            os.fsync(f.fileno())
        os.chmod(tmp_name, FILE_MODE)
        os.replace(tmp_name, path)
    except BaseException:
        try:
            os.unlink(tmp_name)
        except OSError:
            pass
        raise
