"""Todo view-model public API.

Public API:
- TodoProvider: derives the two-section tree and owns all mutations
- DecorationMapper: completed-item markers keyed by item URI
- aggregate: ongoing-count badge

Types:
- TodoRecord, Section, Item, TreeNode, SectionKind, ExpansionState, Badge
"""

from todo_hub.todos.badge import Badge, aggregate
from todo_hub.todos.decorations import (
    ALL,
    Decoration,
    DecorationMapper,
    item_uri,
    parse_item_uri,
)
from todo_hub.todos.provider import TodoProvider
from todo_hub.todos.types import (
    CommandBinding,
    ExpansionState,
    Item,
    Section,
    SectionKind,
    TodoRecord,
    TreeNode,
)

__all__ = [
    "ALL",
    "Badge",
    "CommandBinding",
    "Decoration",
    "DecorationMapper",
    "ExpansionState",
    "Item",
    "Section",
    "SectionKind",
    "TodoProvider",
    "TodoRecord",
    "TreeNode",
    "aggregate",
    "item_uri",
    "parse_item_uri",
]
