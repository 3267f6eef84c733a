"""JSON file record store.

The whole key space is one JSON object on disk. Every ``set`` rewrites
the file atomically via tempfile + fsync + os.replace(), so a failed
write never leaves a partially written document behind. Reads are
tolerant; writes refuse to replace a document they cannot parse.
"""

from __future__ import annotations

import json
import logging
import os
import tempfile
from pathlib import Path
from typing import Any

from todo_hub.store.protocols import RecordStoreError

logger = logging.getLogger(__name__)


class JsonFileRecordStore:
    """Record store persisted as a single JSON document."""

    def __init__(self, path: Path) -> None:
        self._path = path

    @property
    def path(self) -> Path:
        return self._path

    def get(self, key: str, default: Any = None) -> Any:
        try:
            data = self._load()
        except RecordStoreError:
            logger.warning(
                "record_store_read_failed", extra={"file.path": str(self._path)}
            )
            return default
        return data.get(key, default)

    def set(self, key: str, value: Any) -> None:
        # Raises instead of overwriting an unreadable document with one key.
        data = self._load()
        data[key] = value
        _write_json_atomic(self._path, data)
        logger.debug(
            "record_store_written",
            extra={"file.path": str(self._path), "store.key": key},
        )

    def keys(self) -> list[str]:
        return list(self._load())

    def _load(self) -> dict[str, Any]:
        if not self._path.exists():
            return {}
        try:
            data = json.loads(self._path.read_text(encoding="utf-8"))
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            raise RecordStoreError(f"Unreadable store file {self._path}: {e}") from e
        if not isinstance(data, dict):
            raise RecordStoreError(f"Store file is not a JSON object: {self._path}")
        return data


def _write_json_atomic(path: Path, data: dict[str, Any]) -> None:
    """Write JSON atomically via tempfile + fsync + os.replace()."""
    path.parent.mkdir(parents=True, exist_ok=True)
    fd, tmp = tempfile.mkstemp(dir=path.parent, suffix=".tmp")
    try:
        with os.fdopen(fd, "w", encoding="utf-8") as f:
            f.write(json.dumps(data, indent=2))
            f.write("\n")
            f.flush()
            os.fsync(f.fileno())
        Path(tmp).replace(path)
    except BaseException:
        try:
            Path(tmp).unlink()
        except OSError:
            pass
        raise
