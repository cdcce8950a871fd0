# ABOUTME: The `bookcatalog add` command for cataloging a new book.
# ABOUTME: Validates the fields, inserts the book, and reports the assigned ID.

from pathlib import Path

import click
from rich.console import Console
from rich.markup import escape

from bookcatalog.cli.options import db_option, editor_session
from bookcatalog.config import CatalogConfig
from bookcatalog.db.transaction import StorageError
from bookcatalog.models.types import Book

console = Console()


@click.command("add")
@click.option("--title", required=True, help="Book title (1-255 characters).")
@click.option("--summary", default="", help="Free-text summary.")
@click.option("--year", "year_published", type=int, default=0, help="Year published.")
@click.option("--isbn", default="", help="ISBN (up to 13 characters).")
@click.option(
    "--publisher-id",
    type=int,
    default=None,
    help="Publisher ID from `bookcatalog publisher ls` (default: Unknown).",
)
@db_option
@click.pass_obj
def add(
    config: CatalogConfig,
    title: str,
    summary: str,
    year_published: int,
    isbn: str,
    publisher_id: int | None,
    db_path: Path | None,
) -> None:
    """Add a new book to the catalog."""
    with editor_session(config, db_path) as editor:
        publisher = None
        if publisher_id is not None:
            publisher = editor.publishers.get_by_id(publisher_id)
            if publisher is None:
                console.print(f"[red]Publisher {publisher_id} not found.[/red]")
                raise SystemExit(1)

        book = Book(
            title=title,
            summary=summary,
            year_published=year_published,
            isbn=isbn,
            publisher=publisher,
        )
        try:
            result = editor.create(book)
        except StorageError as exc:
            console.print(f"[red]Could not save book: {escape(str(exc))}[/red]")
            raise SystemExit(1) from exc

    if not result.ok:
        for failure in result.validation.failures:
            console.print(f"[red]{escape(failure.reason)}[/red]")
        raise SystemExit(1)

    console.print(f"Added [bold]{escape(book.title)}[/bold] as book {book.id}.")
