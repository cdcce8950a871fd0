# ABOUTME: The `bookcatalog ls` command for listing cataloged books.
# ABOUTME: Displays a Rich table of all books with year, publisher, and ISBN.

from pathlib import Path

import click
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from bookcatalog.cli.options import db_option, editor_session
from bookcatalog.config import CatalogConfig

console = Console()


@click.command("ls")
@db_option
@click.pass_obj
def ls(config: CatalogConfig, db_path: Path | None) -> None:
    """List all books in the catalog."""
    with editor_session(config, db_path) as editor:
        books = editor.list_books()

    if not books:
        console.print("[yellow]No books in the catalog.[/yellow]")
        return

    table = Table()
    table.add_column("ID", style="dim", width=4)
    table.add_column("Title", style="bold")
    table.add_column("Year", justify="right")
    table.add_column("Publisher")
    table.add_column("ISBN")

    for book in books:
        table.add_row(
            str(book.id),
            escape(book.title),
            str(book.year_published) if book.year_published else "",
            escape(book.publisher.name) if book.publisher else "[dim]Unknown[/dim]",
            book.isbn,
        )

    console.print(table)
    console.print(f"\n[dim]{len(books)} book(s)[/dim]")
