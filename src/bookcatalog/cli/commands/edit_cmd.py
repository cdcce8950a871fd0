# ABOUTME: The `bookcatalog edit` command for changing a cataloged book's fields.
# ABOUTME: Locks the book, saves the new values, and prints the audit entries written.

from dataclasses import replace
from pathlib import Path
from typing import Any

import click
from rich.console import Console
from rich.markup import escape

from bookcatalog.cli.options import db_option, editor_session
from bookcatalog.config import CatalogConfig
from bookcatalog.core.audit import BookChanges
from bookcatalog.db.transaction import LockTimeoutError, StorageError

console = Console()


@click.command("edit")
@click.argument("book_id", type=int)
@click.option("--title", default=None, help="New title.")
@click.option("--summary", default=None, help="New summary.")
@click.option("--year", "year_published", type=int, default=None, help="New year published.")
@click.option("--isbn", default=None, help="New ISBN.")
@click.option("--publisher-id", type=int, default=None, help="New publisher ID.")
@db_option
@click.pass_obj
def edit(
    config: CatalogConfig,
    book_id: int,
    title: str | None,
    summary: str | None,
    year_published: int | None,
    isbn: str | None,
    publisher_id: int | None,
    db_path: Path | None,
) -> None:
    """Edit a book's fields; every change is recorded in its audit trail."""
    overrides: dict[str, Any] = {
        name: value
        for name, value in (
            ("title", title),
            ("summary", summary),
            ("year_published", year_published),
            ("isbn", isbn),
        )
        if value is not None
    }

    with editor_session(config, db_path) as editor:
        book = editor.load(book_id)
        if book is None:
            console.print(f"[red]Book {book_id} not found.[/red]")
            raise SystemExit(1)

        if publisher_id is not None:
            publisher = editor.publishers.get_by_id(publisher_id)
            if publisher is None:
                console.print(f"[red]Publisher {publisher_id} not found.[/red]")
                raise SystemExit(1)
            overrides["publisher"] = publisher

        changes = replace(BookChanges.from_book(book), **overrides)
        try:
            result = editor.save(book, changes)
        except LockTimeoutError as exc:
            console.print(f"[red]Book {book_id} is being edited in another session.[/red]")
            raise SystemExit(1) from exc
        except (StorageError, ValueError) as exc:
            console.print(f"[red]Could not save book {book_id}: {escape(str(exc))}[/red]")
            raise SystemExit(1) from exc

    if not result.ok:
        for failure in result.validation.failures:
            console.print(f"[red]{escape(failure.reason)}[/red]")
        raise SystemExit(1)

    if not result.audit_messages:
        console.print(f"No changes to [bold]{escape(book.title)}[/bold].")
        return

    console.print(f"Saved [bold]{escape(book.title)}[/bold]:")
    for message in result.audit_messages:
        console.print(f"  {escape(message)}")
