"""Protocol definitions for the record store.

The view model only ever talks to persistence through this interface, so
hosts can back it with anything that offers synchronous get/set by key.
"""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class RecordStore(Protocol):
    """Opaque key-value persistence."""

    def get(self, key: str, default: Any = None) -> Any:
        """Return the value stored under ``key`` or ``default``."""
        ...

    def set(self, key: str, value: Any) -> None:
        """Replace the value stored under ``key``."""
        ...


class RecordStoreError(Exception):
    """The persisted document cannot be safely read or rewritten."""
