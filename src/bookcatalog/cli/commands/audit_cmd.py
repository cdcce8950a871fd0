# ABOUTME: The `bookcatalog audit` command for showing a book's change history.
# ABOUTME: Lists audit trail entries oldest first with their timestamps.

from pathlib import Path

import click
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from bookcatalog.cli.options import db_option, editor_session
from bookcatalog.config import CatalogConfig

console = Console()


@click.command("audit")
@click.argument("book_id", type=int)
@db_option
@click.pass_obj
def audit(config: CatalogConfig, book_id: int, db_path: Path | None) -> None:
    """Show the audit trail for a book."""
    with editor_session(config, db_path) as editor:
        book = editor.load(book_id)
        if book is None:
            console.print(f"[red]Book {book_id} not found.[/red]")
            raise SystemExit(1)
        entries = editor.fetch_audit_trail(book_id)

    if not entries:
        console.print(f"[yellow]No changes recorded for {escape(book.title)}.[/yellow]")
        return

    table = Table(title=escape(book.title))
    table.add_column("When", style="dim", no_wrap=True)
    table.add_column("Change")

    for entry in entries:
        table.add_row(entry.timestamp, escape(entry.message))

    console.print(table)
