# ABOUTME: The `bookcatalog rm` command for removing a book from the catalog.
# ABOUTME: Deletes the book together with its audit trail.

from pathlib import Path

import click
from rich.console import Console

from bookcatalog.cli.options import db_option, editor_session
from bookcatalog.config import CatalogConfig
from bookcatalog.db.transaction import LockTimeoutError

console = Console()


@click.command("rm")
@click.argument("book_id", type=int)
@db_option
@click.pass_obj
def rm(config: CatalogConfig, book_id: int, db_path: Path | None) -> None:
    """Remove a book and its audit trail."""
    with editor_session(config, db_path) as editor:
        try:
            editor.delete(book_id)
        except ValueError as exc:
            console.print(f"[red]Book {book_id} not found.[/red]")
            raise SystemExit(1) from exc
        except LockTimeoutError as exc:
            console.print(f"[red]Book {book_id} is being edited in another session.[/red]")
            raise SystemExit(1) from exc

    console.print(f"Removed book {book_id}.")
