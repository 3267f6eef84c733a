"""Todo records and the tree nodes derived from them."""

from __future__ import annotations

import logging
import uuid
from dataclasses import dataclass
from enum import StrEnum
from typing import Any

logger = logging.getLogger(__name__)

DEFAULT_URI_SCHEME = "todo"

SECTION_CONTEXT = "todoSection"
ITEM_COMPLETED_CONTEXT = "todoItemCompleted"
ITEM_ONGOING_CONTEXT = "todoItemOngoing"

RENAME_COMMAND = "todo-hub.renameTodo"


def new_todo_id() -> str:
    return uuid.uuid4().hex


@dataclass
class TodoRecord:
    """A single persisted todo."""

    id: str
    label: str
    completed: bool = False

    def to_dict(self) -> dict[str, Any]:
        return {"label": self.label, "completed": self.completed, "id": self.id}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> TodoRecord:
        return cls(
            id=str(data["id"]),
            label=str(data.get("label", "")),
            completed=bool(data.get("completed", False)),
        )

    @classmethod
    def from_entry(cls, item: Any) -> TodoRecord | None:
        """Hydrate one stored entry, or ``None`` when it is not a record."""
        if not isinstance(item, dict) or "id" not in item:
            return None
        return cls.from_dict(item)

    @classmethod
    def parse_many(cls, raw: Any) -> list[TodoRecord]:
        """Hydrate a stored list, skipping entries that cannot be read."""
        if not isinstance(raw, list):
            if raw is not None:
                logger.warning(
                    "todo_records_not_a_list", extra={"raw.type": type(raw).__name__}
                )
            return []
        records: list[TodoRecord] = []
        for index, item in enumerate(raw):
            record = cls.from_entry(item)
            if record is None:
                logger.warning("todo_record_parse_failed", extra={"record.index": index})
                continue
            records.append(record)
        return records


class SectionKind(StrEnum):
    """The two fixed top-level groups."""

    ONGOING = "ongoing"
    COMPLETED = "completed"

    @property
    def is_completed(self) -> bool:
        return self is SectionKind.COMPLETED

    @property
    def title(self) -> str:
        return "Completed" if self.is_completed else "Ongoing"

    @classmethod
    def for_record(cls, record: TodoRecord) -> SectionKind:
        return cls.COMPLETED if record.completed else cls.ONGOING


class ExpansionState(StrEnum):
    EXPANDED = "expanded"
    COLLAPSED = "collapsed"

    @classmethod
    def from_flag(cls, expanded: bool) -> ExpansionState:
        return cls.EXPANDED if expanded else cls.COLLAPSED


@dataclass(frozen=True)
class CommandBinding:
    """Host command invoked when a node is activated."""

    command: str
    title: str
    arguments: tuple[Any, ...] = ()


@dataclass(frozen=True)
class Section:
    """Top-level group node. Derived on every query, never persisted."""

    kind: SectionKind
    count: int
    expansion: ExpansionState

    @property
    def label(self) -> str:
        return f"{self.kind.title} ({self.count})"

    @property
    def context_value(self) -> str:
        return SECTION_CONTEXT

    @property
    def is_expanded(self) -> bool:
        return self.expansion is ExpansionState.EXPANDED


@dataclass(frozen=True)
class Item:
    """Leaf node for one todo record."""

    id: str
    label: str
    completed: bool
    scheme: str = DEFAULT_URI_SCHEME

    @classmethod
    def from_record(cls, record: TodoRecord, scheme: str = DEFAULT_URI_SCHEME) -> Item:
        return cls(
            id=record.id,
            label=record.label,
            completed=record.completed,
            scheme=scheme,
        )

    @property
    def context_value(self) -> str:
        return ITEM_COMPLETED_CONTEXT if self.completed else ITEM_ONGOING_CONTEXT

    @property
    def icon(self) -> str:
        return "check" if self.completed else "circle-outline"

    @property
    def tooltip(self) -> str:
        return f"{self.label} (completed)" if self.completed else self.label

    @property
    def resource_uri(self) -> str:
        return f"{self.scheme}:{self.id}"

    @property
    def command(self) -> CommandBinding:
        """Activating an item opens the rename prompt."""
        return CommandBinding(
            command=RENAME_COMMAND, title="Rename Todo", arguments=(self.id,)
        )


TreeNode = Section | Item
