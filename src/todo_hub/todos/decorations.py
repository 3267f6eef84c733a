"""Per-item decorations for completed todos.

Hosts route decoration lookups through a synthetic ``<scheme>:<id>`` URI.
The scheme belongs to this system only, so lookups for the host's own
resources always come back empty.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Final

from todo_hub.events import EventEmitter

if TYPE_CHECKING:
    from collections.abc import Iterable

    from todo_hub.todos.provider import TodoProvider

logger = logging.getLogger(__name__)


class _All(Enum):
    ALL = "all"


# Wildcard payload: every decoration may have changed.
ALL: Final = _All.ALL

DecorationChange = _All | list[str]


@dataclass(frozen=True)
class Decoration:
    """Visual marker for a completed item.

    ``propagate`` is always False so the marker never bleeds into parents.
    """

    propagate: bool = False
    tooltip: str | None = "Completed"
    color: str | None = "disabledForeground"


COMPLETED_DECORATION = Decoration()


def item_uri(todo_id: str, scheme: str) -> str:
    return f"{scheme}:{todo_id}"


def parse_item_uri(uri: str, scheme: str) -> str | None:
    """Return the todo id encoded in ``uri``, or None for foreign URIs."""
    prefix, sep, todo_id = uri.partition(":")
    if not sep or prefix != scheme or not todo_id:
        return None
    return todo_id


class DecorationMapper:
    """Maps item URIs to decorations, reading through the provider."""

    def __init__(self, provider: TodoProvider) -> None:
        self._provider = provider
        self.on_did_change_decorations: EventEmitter[DecorationChange] = EventEmitter(
            "decorations"
        )

    def provide(self, uri: str) -> Decoration | None:
        todo_id = parse_item_uri(uri, self._provider.scheme)
        if todo_id is None:
            return None
        record = self._provider.get(todo_id)
        if record is not None and record.completed:
            return COMPLETED_DECORATION
        return None

    def refresh(self, ids: Iterable[str] | None = None) -> None:
        if ids is None:
            self.on_did_change_decorations.fire(ALL)
            return
        scheme = self._provider.scheme
        self.on_did_change_decorations.fire([item_uri(i, scheme) for i in ids])
