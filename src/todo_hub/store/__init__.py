"""Record store implementations.

Public API:
- RecordStore: protocol the view model persists through
- MemoryRecordStore: in-process store
- JsonFileRecordStore: single JSON document on disk
- create_record_store: factory from config
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from todo_hub.config.models import ConfigError
from todo_hub.store.file import JsonFileRecordStore
from todo_hub.store.memory import MemoryRecordStore
from todo_hub.store.protocols import RecordStore, RecordStoreError

if TYPE_CHECKING:
    from todo_hub.config.models import TodoHubConfig


def create_record_store(config: TodoHubConfig) -> JsonFileRecordStore:
    """Create the file-backed store configured in ``config.storage``."""
    path = config.store_path
    if path.is_dir():
        raise ConfigError(f"Store path is a directory: {path}")
    return JsonFileRecordStore(path)


__all__ = [
    "JsonFileRecordStore",
    "MemoryRecordStore",
    "RecordStore",
    "RecordStoreError",
    "create_record_store",
]
