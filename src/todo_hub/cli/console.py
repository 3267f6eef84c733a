"""Shared console utilities for CLI commands."""

from __future__ import annotations

from typing import TYPE_CHECKING

from rich.console import Console
from rich.text import Text
from rich.tree import Tree

from todo_hub.todos.types import Item, Section

if TYPE_CHECKING:
    from todo_hub.controller import ViewController
    from todo_hub.todos.badge import Badge

# Shared console instance for all CLI commands
console = Console()

SHORT_ID_LENGTH = 8


def error(msg: str) -> None:
    """Print an error message in red."""
    console.print(f"[red]{msg}[/red]")


def warning(msg: str) -> None:
    """Print a warning message in yellow."""
    console.print(f"[yellow]{msg}[/yellow]")


def success(msg: str) -> None:
    """Print a success message in green."""
    console.print(f"[green]{msg}[/green]")


def info(msg: str) -> None:
    """Print an info message in cyan."""
    console.print(f"[cyan]{msg}[/cyan]")


def dim(msg: str) -> None:
    """Print a dimmed message."""
    console.print(f"[dim]{msg}[/dim]")


def badge_text(badge: Badge | None) -> str:
    return badge.tooltip if badge is not None else "No ongoing tasks"


def _item_text(controller: ViewController, item: Item) -> Text:
    marker = "✔" if item.completed else "○"
    text = Text(f"{marker} ")
    decoration = controller.decorations.provide(item.resource_uri)
    text.append(item.label, style="dim strike" if decoration is not None else "")
    text.append(f"  {item.id[:SHORT_ID_LENGTH]}", style="dim")
    return text


def render_tree(controller: ViewController) -> Tree:
    """Build a Rich tree of both sections, honoring their expansion state."""
    provider = controller.provider
    root = Tree(Text("Todo Hub", style="bold"), guide_style="dim")
    for node in provider.children():
        match provider.tree_item(node):
            case Section() as section:
                arrow = "▾" if section.is_expanded else "▸"
                branch = root.add(Text(f"{arrow} {section.label}", style="bold"))
                if section.is_expanded:
                    for child in provider.children(section):
                        match child:
                            case Item() as item:
                                branch.add(_item_text(controller, item))
                            case Section():
                                pass
            case Item() as item:
                root.add(_item_text(controller, item))
    return root
