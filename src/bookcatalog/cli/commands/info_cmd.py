# ABOUTME: The `bookcatalog info` command for displaying one book's fields.
# ABOUTME: Shows every stored field plus the date added and last modified timestamps.

from pathlib import Path

import click
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from bookcatalog.cli.options import db_option, editor_session
from bookcatalog.config import CatalogConfig

console = Console()


@click.command("info")
@click.argument("book_id", type=int)
@db_option
@click.pass_obj
def info(config: CatalogConfig, book_id: int, db_path: Path | None) -> None:
    """Show detailed fields for a book by ID."""
    with editor_session(config, db_path) as editor:
        book = editor.load(book_id)

    if book is None:
        console.print(f"[red]Book {book_id} not found.[/red]")
        raise SystemExit(1)

    table = Table(show_header=False, box=None, pad_edge=False)
    table.add_column("Field", style="bold", width=14)
    table.add_column("Value")

    table.add_row("ID", str(book.id))
    table.add_row("Title", escape(book.title))
    table.add_row("Year", str(book.year_published))
    table.add_row("Publisher", escape(book.publisher.name) if book.publisher else "Unknown")
    if book.isbn:
        table.add_row("ISBN", book.isbn)
    if book.summary:
        table.add_row("Summary", escape(book.summary))
    table.add_row("Added", book.date_added or "")
    table.add_row("Modified", book.last_modified or "")

    console.print(table)
