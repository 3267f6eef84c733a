"""Synchronous observer channel used for all outbound notifications.

Example:
    changed = EventEmitter[None]("tree")

    @changed.on
    def rerender(_):
        ...

    unsubscribe = changed.subscribe(print)
    changed.fire(None)
    unsubscribe()
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Generic, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")

Listener = Callable[[T], object]


class EventEmitter(Generic[T]):
    """Fan-out of one event type to subscribed listeners.

    Listeners run synchronously in subscription order. Exceptions raised by a
    listener propagate to whoever fired the event.
    """

    def __init__(self, name: str = "event") -> None:
        self._name = name
        self._listeners: list[Listener[T]] = []

    @property
    def name(self) -> str:
        return self._name

    def subscribe(self, listener: Listener[T]) -> Callable[[], None]:
        """Register a listener. Returns a callable that removes it."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def on(self, listener: Listener[T]) -> Listener[T]:
        """Decorator to register a listener."""
        self._listeners.append(listener)
        return listener

    def fire(self, payload: T) -> None:
        logger.debug(
            "event_fired",
            extra={"event.name": self._name, "event.listeners": len(self._listeners)},
        )
        for listener in list(self._listeners):
            listener(payload)

    def clear(self) -> None:
        self._listeners.clear()

    def __len__(self) -> int:
        return len(self._listeners)
