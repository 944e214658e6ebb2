from __future__ import annotations

import logging
import os
import tempfile
from pathlib import Path
from typing import Dict, Optional, Protocol

from dashboard.errors import PersistenceReadError, PersistenceWriteError

logger = logging.getLogger(__name__)


class KeyValueStorage(Protocol):
    def get(self, key: str) -> Optional[str]:
        ...

    def set(self, key: str, value: str) -> None:
        ...


def _check_quota(key: str, value: str, max_bytes: Optional[int]) -> None:
    if max_bytes is None:
        return
    size = len(value.encode("utf-8"))
    if size > max_bytes:
        raise PersistenceWriteError(
            f"Storage quota exceeded for '{key}': {size} bytes > {max_bytes} bytes"
        )


class MemoryStorage:
    """Dict-backed storage; nothing survives the process."""

    def __init__(self, max_bytes: Optional[int] = None):
        self.max_bytes = max_bytes
        self._data: Dict[str, str] = {}

    def get(self, key: str) -> Optional[str]:
        return self._data.get(key)

    def set(self, key: str, value: str) -> None:
        _check_quota(key, value, self.max_bytes)
        self._data[key] = value


class FileStorage:
    """One `<key>.json` file per key inside `root`.

    Writes go to a temporary file in the same directory and are moved into
    place, so a failed write never leaves a half-written blob behind.
    """

    def __init__(self, root: Path, max_bytes: Optional[int] = None):
        self.root = Path(root)
        self.max_bytes = max_bytes

    def path_for(self, key: str) -> Path:
        return self.root / f"{key}.json"

    def get(self, key: str) -> Optional[str]:
        p = self.path_for(key)
        if not p.exists():
            return None
        try:
            return p.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise PersistenceReadError(f"Could not read {p}: {e}") from e

    def set(self, key: str, value: str) -> None:
        _check_quota(key, value, self.max_bytes)
        p = self.path_for(key)
        try:
            self.root.mkdir(parents=True, exist_ok=True)
            fd, tmp = tempfile.mkstemp(dir=self.root, prefix=f".{key}.", suffix=".tmp")
            try:
                with os.fdopen(fd, "w", encoding="utf-8") as f:
                    f.write(value)
                os.replace(tmp, p)
            except BaseException:
                Path(tmp).unlink(missing_ok=True)
                raise
        except OSError as e:
            raise PersistenceWriteError(f"Could not write {p}: {e}") from e
        logger.debug("Wrote %d bytes to %s", len(value), p)
