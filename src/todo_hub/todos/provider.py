"""Tree data provider for todos.

The provider is the only writer of the record store. Every mutation reads
the current snapshot, changes it, writes it back once and then fires
``on_did_change_tree_data``. The tree itself is never cached: hosts pull
``children()`` again after each notification.
"""

from __future__ import annotations

import logging
from builtins import list as builtin_list
from collections.abc import Callable
from typing import Any

from todo_hub.events import EventEmitter
from todo_hub.store.protocols import RecordStore, RecordStoreError
from todo_hub.todos.types import (
    DEFAULT_URI_SCHEME,
    ExpansionState,
    Item,
    Section,
    SectionKind,
    TodoRecord,
    TreeNode,
    new_todo_id,
)

logger = logging.getLogger(__name__)

DEFAULT_STORE_KEY = "todos"


class TodoProvider:
    """Derives the Ongoing/Completed tree from the flat record list."""

    def __init__(
        self,
        store: RecordStore,
        *,
        key: str = DEFAULT_STORE_KEY,
        ongoing: ExpansionState = ExpansionState.EXPANDED,
        completed: ExpansionState = ExpansionState.COLLAPSED,
        scheme: str = DEFAULT_URI_SCHEME,
        id_factory: Callable[[], str] = new_todo_id,
    ) -> None:
        self._store = store
        self._key = key
        self._scheme = scheme
        self._id_factory = id_factory
        # Section layout is session state; it survives refreshes but is
        # never written to the store.
        self.ongoing_state = ongoing
        self.completed_state = completed
        self.on_did_change_tree_data: EventEmitter[None] = EventEmitter("tree")

    @property
    def scheme(self) -> str:
        return self._scheme

    # -- queries ----------------------------------------------------------

    def list(self) -> builtin_list[TodoRecord]:
        return TodoRecord.parse_many(self._store.get(self._key, []))

    def get(self, todo_id: str) -> TodoRecord | None:
        for record in self.list():
            if record.id == todo_id:
                return record
        return None

    def children(
        self, section: Section | None = None
    ) -> builtin_list[Section] | builtin_list[Item]:
        records = self.list()
        if section is None:
            ongoing = sum(1 for r in records if not r.completed)
            return [
                Section(SectionKind.ONGOING, ongoing, self.ongoing_state),
                Section(
                    SectionKind.COMPLETED, len(records) - ongoing, self.completed_state
                ),
            ]
        wanted = section.kind.is_completed
        return [
            Item.from_record(r, self._scheme) for r in records if r.completed == wanted
        ]

    def tree_item(self, node: TreeNode) -> TreeNode:
        return node

    def expansion(self, kind: SectionKind) -> ExpansionState:
        match kind:
            case SectionKind.ONGOING:
                return self.ongoing_state
            case SectionKind.COMPLETED:
                return self.completed_state

    def set_expansion(self, kind: SectionKind, state: ExpansionState) -> None:
        match kind:
            case SectionKind.ONGOING:
                self.ongoing_state = state
            case SectionKind.COMPLETED:
                self.completed_state = state

    # -- mutations --------------------------------------------------------

    def refresh(self) -> None:
        self.on_did_change_tree_data.fire(None)

    def add(self, label: str) -> TodoRecord | None:
        text = label.strip()
        if not text:
            return None
        entries = self._load_entries()
        record = TodoRecord(
            id=self._fresh_id(_records(entries)), label=text, completed=False
        )
        entries.append(record)
        self._save(entries)
        logger.debug("todo_added", extra={"todo.id": record.id})
        self.refresh()
        return record

    def remove(self, todo_id: str) -> None:
        entries = self._load_entries()
        kept = [
            e for e in entries if not (isinstance(e, TodoRecord) and e.id == todo_id)
        ]
        self._save(kept)
        logger.debug(
            "todo_removed",
            extra={"todo.id": todo_id, "todo.found": len(kept) != len(entries)},
        )
        self.refresh()

    def toggle_complete(self, todo_id: str) -> None:
        entries = self._load_entries()
        for record in _records(entries):
            if record.id == todo_id:
                record.completed = not record.completed
                logger.debug(
                    "todo_toggled",
                    extra={"todo.id": todo_id, "todo.completed": record.completed},
                )
                break
        self._save(entries)
        self.refresh()

    # Reopening a completed todo is the same flip.
    undo_complete = toggle_complete

    def rename(self, todo_id: str, new_label: str) -> None:
        text = new_label.strip()
        if not text:
            return
        entries = self._load_entries()
        for record in _records(entries):
            if record.id == todo_id:
                record.label = text
                logger.debug("todo_renamed", extra={"todo.id": todo_id})
                break
        self._save(entries)
        self.refresh()

    # -- internals --------------------------------------------------------

    def _load_entries(self) -> builtin_list[Any]:
        """Read the stored list for rewriting.

        Entries that do not hydrate stay as raw values so a save writes
        them back untouched.
        """
        raw = self._store.get(self._key, [])
        if raw is None:
            return []
        if not isinstance(raw, builtin_list):
            raise RecordStoreError(
                f"Stored {self._key!r} is a {type(raw).__name__}, not a list"
            )
        entries: builtin_list[Any] = []
        for entry in raw:
            record = TodoRecord.from_entry(entry)
            entries.append(entry if record is None else record)
        return entries

    def _fresh_id(self, records: builtin_list[TodoRecord]) -> str:
        taken = {r.id for r in records}
        todo_id = self._id_factory()
        while todo_id in taken:
            todo_id = self._id_factory()
        return todo_id

    def _save(self, entries: builtin_list[Any]) -> None:
        self._store.set(
            self._key,
            [e.to_dict() if isinstance(e, TodoRecord) else e for e in entries],
        )


def _records(entries: builtin_list[Any]) -> builtin_list[TodoRecord]:
    return [e for e in entries if isinstance(e, TodoRecord)]
