"""Main CLI application."""

from pathlib import Path
from typing import Annotated

import typer

from todo_hub.cli.commands import config, todo

app = typer.Typer(
    name="todo-hub",
    help="Todo Hub - ongoing and completed todos",
    invoke_without_command=True,
)


@app.callback()
def main(
    ctx: typer.Context,
    config_path: Annotated[
        Path | None,
        typer.Option(
            "--config",
            "-c",
            help="Path to configuration file",
        ),
    ] = None,
    store_path: Annotated[
        Path | None,
        typer.Option(
            "--store",
            "-s",
            help="Path to the todo store (overrides config)",
        ),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Enable debug logging"),
    ] = False,
) -> None:
    """Todo Hub. Run without a command to show the todo tree."""
    from todo_hub.logging import configure_logging

    configure_logging(level="DEBUG" if verbose else None, use_rich=True)

    obj = ctx.ensure_object(dict)
    obj["config_path"] = config_path
    obj["store_path"] = store_path

    if ctx.invoked_subcommand is None:
        todo.show_tree(ctx)


todo.register(app)
config.register(app)


if __name__ == "__main__":
    app()
