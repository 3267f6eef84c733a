"""View badge showing how many todos are still open."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from todo_hub.todos.types import TodoRecord


@dataclass(frozen=True)
class Badge:
    value: int
    tooltip: str


def aggregate(records: Iterable[TodoRecord]) -> Badge | None:
    """Count ongoing records. No badge when nothing is open."""
    ongoing = sum(1 for r in records if not r.completed)
    if ongoing <= 0:
        return None
    suffix = "" if ongoing == 1 else "s"
    return Badge(value=ongoing, tooltip=f"{ongoing} ongoing task{suffix}")
