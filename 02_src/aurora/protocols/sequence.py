"""Durable protocol sequence counter backed by a text file."""

import os
import tempfile
from pathlib import Path
from typing import Protocol

from ..logging_config import get_logger

logger = get_logger(__name__)


class ISequenceStore(Protocol):
    """Persistence for the last issued protocol sequence value."""

    def load(self) -> int:
        """Read the persisted value. Never raises."""
        ...

    def save(self, value: int) -> None:
        """Overwrite the persisted value. Raises OSError on failure."""
        ...


class FileSequenceStore:
    """Stores the counter as decimal ASCII in a single file.

    Writes go to a sibling temp file that is then renamed over the target,
    so a crash mid-write leaves either the old or the new value on disk,
    never a truncated one. A crash between issuing an identifier and the
    rename still loses that increment; this is a single-writer,
    best-effort store.
    """

    def __init__(self, path: str | Path):
        self._path = Path(path)

    @property
    def path(self) -> Path:
        return self._path

    def load(self) -> int:
        """Read the last sequence value; missing or invalid contents yield 0."""
        if not self._path.exists():
            logger.info("Sequence file %s not found, starting from 0", self._path)
            return 0

        try:
            raw = self._path.read_text(encoding="utf-8").strip()
        except OSError as e:
            logger.error("Failed to read sequence file %s: %s", self._path, e)
            return 0

        try:
            value = int(raw)
        except ValueError:
            logger.error(
                "Invalid sequence file contents in %s: %r", self._path, raw[:32]
            )
            return 0

        if value < 0:
            logger.error("Negative sequence value %s in %s", value, self._path)
            return 0

        logger.info("Last protocol sequence loaded: %s", value)
        return value

    def save(self, value: int) -> None:
        """Atomically replace the persisted value."""
        self._path.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp_name = tempfile.mkstemp(
            dir=self._path.parent, prefix=f".{self._path.name}.", suffix=".tmp"
        )
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                f.write(str(value))
                f.flush()
                os.fsync(f.fileno())
            os.replace(tmp_name, self._path)
        except OSError:
            try:
                os.unlink(tmp_name)
            except OSError:
                pass
            raise
