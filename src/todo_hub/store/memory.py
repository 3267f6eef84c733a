"""In-process record store."""

from __future__ import annotations

import copy
from typing import Any


class MemoryRecordStore:
    """Record store kept in process memory.

    Values are deep-copied on the way in and out so callers never share
    mutable state with the store, matching the file-backed behavior.
    """

    def __init__(self, initial: dict[str, Any] | None = None) -> None:
        self._data: dict[str, Any] = copy.deepcopy(initial) if initial else {}

    def get(self, key: str, default: Any = None) -> Any:
        if key not in self._data:
            return default
        return copy.deepcopy(self._data[key])

    def set(self, key: str, value: Any) -> None:
        self._data[key] = copy.deepcopy(value)

    def keys(self) -> list[str]:
        return list(self._data)
