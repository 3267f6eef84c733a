"""View controller: command dispatch and view-state bookkeeping.

Every command runs the provider mutation first (which fires the tree
notification), then refreshes decorations, then recomputes the badge.
Observers therefore never see a badge or decoration computed from data
older than the tree they were told about.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any

from todo_hub.events import EventEmitter
from todo_hub.todos.badge import Badge, aggregate
from todo_hub.todos.decorations import DecorationMapper
from todo_hub.todos.provider import TodoProvider
from todo_hub.todos.types import ExpansionState, Item, Section, TreeNode

logger = logging.getLogger(__name__)

# (message, prefilled value) -> user input, or None when dismissed
Prompt = Callable[[str, str | None], str | None]
Notify = Callable[[str], None]

ADD_TODO = "todo-hub.addTodo"
REMOVE_TODO = "todo-hub.removeTodo"
TOGGLE_COMPLETE = "todo-hub.toggleComplete"
UNDO_COMPLETE = "todo-hub.undoComplete"
REFRESH = "todo-hub.refresh"
RENAME_TODO = "todo-hub.renameTodo"
HELLO_WORLD = "todo-hub.helloWorld"

HELLO_MESSAGE = "Hello World from Todo Hub!"


class UnknownCommandError(KeyError):
    """Raised when dispatching a command id that was never registered."""


class ViewController:
    """Wires provider, decorations and badge together for one view."""

    def __init__(
        self,
        provider: TodoProvider,
        decorations: DecorationMapper | None = None,
        *,
        prompt: Prompt | None = None,
        notify: Notify | None = None,
    ) -> None:
        self.provider = provider
        self.decorations = decorations or DecorationMapper(provider)
        self._prompt = prompt
        self._notify = notify
        self.badge: Badge | None = None
        self.on_did_change_badge: EventEmitter[Badge | None] = EventEmitter("badge")
        self.commands: dict[str, Callable[..., Any]] = {
            ADD_TODO: self.add_todo,
            REMOVE_TODO: self.remove_todo,
            TOGGLE_COMPLETE: self.toggle_complete,
            UNDO_COMPLETE: self.undo_complete,
            REFRESH: self.refresh,
            RENAME_TODO: self.rename_todo,
            HELLO_WORLD: self.hello_world,
        }

    def activate(self) -> None:
        """Compute the startup badge."""
        logger.info("todo_view_activated")
        self.update_badge()

    def execute(self, command_id: str, *args: Any) -> Any:
        handler = self.commands.get(command_id)
        if handler is None:
            raise UnknownCommandError(command_id)
        logger.debug("command_dispatched", extra={"command.id": command_id})
        return handler(*args)

    # -- commands ---------------------------------------------------------

    def add_todo(self, label: str | None = None) -> str | None:
        """Add a todo, prompting for the label when none is given.

        Returns the new todo id, or None when nothing was added.
        """
        if label is None:
            label = self._ask("New todo")
        if not label or not label.strip():
            return None
        record = self.provider.add(label)
        self._after_mutation()
        return record.id if record else None

    def remove_todo(self, todo_id: str) -> None:
        self.provider.remove(todo_id)
        self._after_mutation()

    def toggle_complete(self, todo_id: str) -> None:
        self.provider.toggle_complete(todo_id)
        self._after_mutation()

    def undo_complete(self, todo_id: str) -> None:
        self.provider.undo_complete(todo_id)
        self._after_mutation()

    def refresh(self) -> None:
        self.provider.refresh()
        self._after_mutation()

    def rename_todo(self, todo_id: str, new_label: str | None = None) -> None:
        if new_label is None:
            record = self.provider.get(todo_id)
            new_label = self._ask("Rename todo", record.label if record else None)
        if not new_label or not new_label.strip():
            return
        self.provider.rename(todo_id, new_label.strip())
        self._after_mutation()

    def hello_world(self) -> None:
        if self._notify is not None:
            self._notify(HELLO_MESSAGE)
        else:
            logger.info("hello_world")

    # -- host view events -------------------------------------------------

    def on_did_expand(self, node: TreeNode) -> None:
        self._track_expansion(node, ExpansionState.EXPANDED)

    def on_did_collapse(self, node: TreeNode) -> None:
        self._track_expansion(node, ExpansionState.COLLAPSED)

    def update_badge(self) -> Badge | None:
        self.badge = aggregate(self.provider.list())
        self.on_did_change_badge.fire(self.badge)
        return self.badge

    # -- internals --------------------------------------------------------

    def _track_expansion(self, node: TreeNode, state: ExpansionState) -> None:
        match node:
            case Section(kind=kind):
                self.provider.set_expansion(kind, state)
                logger.debug(
                    "section_expansion_changed",
                    extra={"section.kind": kind.value, "section.state": state.value},
                )
            case Item():
                pass

    def _after_mutation(self) -> None:
        self.decorations.refresh()
        self.update_badge()

    def _ask(self, message: str, value: str | None = None) -> str | None:
        if self._prompt is None:
            return None
        return self._prompt(message, value)
