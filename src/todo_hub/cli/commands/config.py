"""Configuration management commands."""

from pathlib import Path
from typing import Annotated

import click
import typer

from todo_hub.cli.console import console, error, success


def register(app: typer.Typer) -> None:
    """Register the config command."""

    @app.command()
    def config(
        action: Annotated[
            str | None,
            typer.Argument(help="Action: show, validate"),
        ] = None,
        path: Annotated[
            Path | None,
            typer.Option(
                "--path",
                "-p",
                help="Path to config file (default: $TODO_HUB_HOME/config.toml)",
            ),
        ] = None,
    ) -> None:
        """Manage configuration."""
        if action is None:
            ctx = click.get_current_context()
            click.echo(ctx.get_help())
            raise typer.Exit(0)

        import tomllib

        from pydantic import ValidationError
        from rich.syntax import Syntax
        from rich.table import Table

        from todo_hub.config import load_config
        from todo_hub.config.paths import get_config_path

        expanded_path = path.expanduser() if path else get_config_path()

        if action == "show":
            if not expanded_path.exists():
                error(f"Config file not found: {expanded_path}")
                raise typer.Exit(1)

            content = expanded_path.read_text()
            syntax = Syntax(content, "toml", theme="monokai", line_numbers=True)
            console.print(f"[bold]Config file: {expanded_path}[/bold]\n")
            console.print(syntax)

        elif action == "validate":
            if not expanded_path.exists():
                error(f"Config file not found: {expanded_path}")
                raise typer.Exit(1)

            try:
                config_obj = load_config(expanded_path)
            except tomllib.TOMLDecodeError as e:
                error(f"Invalid TOML: {e}")
                raise typer.Exit(1) from None
            except ValidationError as e:
                error("Configuration validation failed:")
                for err in e.errors():
                    loc = ".".join(str(part) for part in err["loc"])
                    console.print(f"  [red]{loc}[/red]: {err['msg']}")
                raise typer.Exit(1) from None

            success("Configuration is valid!")
            table = Table(show_header=False)
            table.add_column("Setting", style="cyan")
            table.add_column("Value")
            table.add_row("Store", str(config_obj.store_path))
            table.add_row("Store key", config_obj.storage.key)
            table.add_row("URI scheme", config_obj.view.uri_scheme)
            table.add_row("Ongoing expanded", str(config_obj.view.ongoing_expanded))
            table.add_row(
                "Completed expanded", str(config_obj.view.completed_expanded)
            )
            console.print(table)

        else:
            error(f"Unknown action: {action}")
            raise typer.Exit(1)
