"""Todo management commands."""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
from typing import TYPE_CHECKING, Annotated

import typer

from todo_hub.cli.console import (
    badge_text,
    console,
    dim,
    error,
    info,
    render_tree,
    success,
    warning,
)
from todo_hub.store import RecordStoreError

if TYPE_CHECKING:
    from todo_hub.controller import ViewController


def _prompt(message: str, value: str | None) -> str | None:
    answer = typer.prompt(message, default=value or "", show_default=bool(value))
    return answer or None


def _notify(message: str) -> None:
    info(message)


def _controller(ctx: typer.Context) -> ViewController:
    """Build (once per invocation) the controller for the selected store."""
    import tomllib

    from pydantic import ValidationError
    from rich.markup import escape

    from todo_hub.cli.runtime import bootstrap_runtime
    from todo_hub.config import ConfigError

    obj = ctx.ensure_object(dict)
    if "controller" not in obj:
        try:
            runtime = bootstrap_runtime(
                config_path=obj.get("config_path"),
                store_path=obj.get("store_path"),
                prompt=_prompt,
                notify=_notify,
            )
        except FileNotFoundError as e:
            error(escape(str(e)))
            raise typer.Exit(1) from None
        except (ConfigError, ValidationError, tomllib.TOMLDecodeError) as e:
            error(f"Invalid configuration: {escape(str(e))}")
            raise typer.Exit(1) from None
        obj["controller"] = runtime.controller
    return obj["controller"]


def _resolve_id(controller: ViewController, todo_id: str) -> str:
    """Expand a unique id prefix (as printed by ``list``) to the full id.

    Unknown ids are passed through unchanged; the provider treats them as
    a no-op.
    """
    if not todo_id.strip():
        error("Todo id must not be empty")
        raise typer.Exit(1)
    ids = [r.id for r in controller.provider.list()]
    if todo_id in ids:
        return todo_id
    matches = [i for i in ids if i.startswith(todo_id)]
    if len(matches) == 1:
        return matches[0]
    if len(matches) > 1:
        error(f"Ambiguous todo id: {todo_id}")
        raise typer.Exit(1)
    warning(f"Todo {todo_id} not found")
    return todo_id


@contextmanager
def _writing() -> Iterator[None]:
    """Turn a store that refuses a write into a CLI error."""
    from rich.markup import escape

    try:
        yield
    except RecordStoreError as e:
        error(escape(str(e)))
        raise typer.Exit(1) from None


def _print_badge(controller: ViewController) -> None:
    dim(badge_text(controller.badge))


def show_tree(
    ctx: typer.Context,
    *,
    expand_completed: bool = False,
    collapse_ongoing: bool = False,
) -> None:
    from todo_hub.todos import Section, SectionKind

    controller = _controller(ctx)
    for node in controller.provider.children():
        match node:
            case Section(kind=SectionKind.COMPLETED) if expand_completed:
                controller.on_did_expand(node)
            case Section(kind=SectionKind.ONGOING) if collapse_ongoing:
                controller.on_did_collapse(node)
            case _:
                pass
    console.print(render_tree(controller))
    _print_badge(controller)


def register(app: typer.Typer) -> None:
    """Register the todo commands on the root app."""

    @app.command("list")
    def list_cmd(
        ctx: typer.Context,
        expand_completed: Annotated[
            bool,
            typer.Option("--expand-completed", "-e", help="Show completed todos"),
        ] = False,
        collapse_ongoing: Annotated[
            bool,
            typer.Option("--collapse-ongoing", help="Hide ongoing todos"),
        ] = False,
    ) -> None:
        """Show the Ongoing and Completed sections."""
        show_tree(
            ctx,
            expand_completed=expand_completed,
            collapse_ongoing=collapse_ongoing,
        )

    @app.command("add")
    def add_cmd(
        ctx: typer.Context,
        label: Annotated[
            str | None, typer.Argument(help="Todo text (prompted when omitted)")
        ] = None,
    ) -> None:
        """Add a new todo."""
        controller = _controller(ctx)
        with _writing():
            todo_id = controller.add_todo(label)
        if todo_id is None:
            warning("Nothing added: label is empty")
        else:
            success(f"Added todo {todo_id[:8]}")
        _print_badge(controller)

    @app.command("remove")
    def remove_cmd(
        ctx: typer.Context,
        todo_id: Annotated[str, typer.Argument(help="Todo ID")],
    ) -> None:
        """Delete a todo."""
        controller = _controller(ctx)
        with _writing():
            controller.remove_todo(_resolve_id(controller, todo_id))
        _print_badge(controller)

    @app.command("done")
    def done_cmd(
        ctx: typer.Context,
        todo_id: Annotated[str, typer.Argument(help="Todo ID")],
    ) -> None:
        """Toggle a todo's completion (mark complete)."""
        controller = _controller(ctx)
        with _writing():
            controller.toggle_complete(_resolve_id(controller, todo_id))
        _print_badge(controller)

    @app.command("undone")
    def undone_cmd(
        ctx: typer.Context,
        todo_id: Annotated[str, typer.Argument(help="Todo ID")],
    ) -> None:
        """Toggle a todo's completion (reopen)."""
        controller = _controller(ctx)
        with _writing():
            controller.undo_complete(_resolve_id(controller, todo_id))
        _print_badge(controller)

    @app.command("rename")
    def rename_cmd(
        ctx: typer.Context,
        todo_id: Annotated[str, typer.Argument(help="Todo ID")],
        label: Annotated[
            str | None, typer.Argument(help="New text (prompted when omitted)")
        ] = None,
    ) -> None:
        """Rename a todo."""
        controller = _controller(ctx)
        with _writing():
            controller.rename_todo(_resolve_id(controller, todo_id), label)
        _print_badge(controller)

    @app.command("refresh")
    def refresh_cmd(ctx: typer.Context) -> None:
        """Recompute the view from the store."""
        controller = _controller(ctx)
        controller.refresh()
        console.print(render_tree(controller))
        _print_badge(controller)

    @app.command("hello")
    def hello_cmd(ctx: typer.Context) -> None:
        """Say hello."""
        _controller(ctx).hello_world()
