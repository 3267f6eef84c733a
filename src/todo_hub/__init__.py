"""Todo Hub - a two-section todo view model."""

from todo_hub.controller import UnknownCommandError, ViewController
from todo_hub.todos import DecorationMapper, TodoProvider, aggregate

__version__ = "0.1.0"

__all__ = [
    "DecorationMapper",
    "TodoProvider",
    "UnknownCommandError",
    "ViewController",
    "aggregate",
]
