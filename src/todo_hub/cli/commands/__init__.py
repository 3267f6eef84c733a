"""CLI command modules."""

from todo_hub.cli.commands import config, todo

__all__ = [
    "config",
    "todo",
]
