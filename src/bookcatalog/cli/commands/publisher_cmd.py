# ABOUTME: The `bookcatalog publisher` command group for managing publishers.
# ABOUTME: Provides ls and add subcommands.

from pathlib import Path

import click
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from bookcatalog.cli.options import db_option, editor_session
from bookcatalog.config import CatalogConfig

console = Console()


@click.group("publisher")
def publisher() -> None:
    """Manage publishers."""


@publisher.command("ls")
@db_option
@click.pass_obj
def publisher_ls(config: CatalogConfig, db_path: Path | None) -> None:
    """List all publishers."""
    with editor_session(config, db_path) as editor:
        publishers = editor.list_publishers()

    table = Table()
    table.add_column("ID", style="dim", justify="right")
    table.add_column("Name", style="cyan")

    for entry in publishers:
        table.add_row(str(entry.id), escape(entry.name))

    console.print(table)


@publisher.command("add")
@click.argument("name")
@db_option
@click.pass_obj
def publisher_add(config: CatalogConfig, name: str, db_path: Path | None) -> None:
    """Add a publisher."""
    with editor_session(config, db_path) as editor:
        try:
            created = editor.add_publisher(name)
        except ValueError as exc:
            console.print(f"[red]{escape(str(exc))}[/red]")
            raise SystemExit(1) from exc

    console.print(f"Added publisher [cyan]{escape(created.name)}[/cyan] as {created.id}.")
