# ABOUTME: Shared Click options and session helpers for bookcatalog CLI commands.
# ABOUTME: Provides the --db flag and a context manager that opens an edit session.

from collections.abc import Iterator
from contextlib import closing, contextmanager
from pathlib import Path

import click
from rich.console import Console
from rich.markup import escape

from bookcatalog.config import DEFAULT_DB_PATH, CatalogConfig
from bookcatalog.core.editor import BookEditor
from bookcatalog.db.connection import connect
from bookcatalog.db.transaction import StorageError

console = Console()

db_option = click.option(
    "--db",
    "db_path",
    type=click.Path(path_type=Path),
    default=None,
    help=f"Path to catalog database (default: $BOOKCATALOG_DB or {DEFAULT_DB_PATH})",
)


@contextmanager
def editor_session(config: CatalogConfig, db_path: Path | None) -> Iterator[BookEditor]:
    """Open the catalog for one command and close it however the command exits.

    Storage errors the command does not handle itself are reported and end
    the command with exit status 1.
    """
    try:
        with closing(connect(config.with_db_path(db_path))) as conn:
            yield BookEditor(conn)
    except StorageError as exc:
        console.print(f"[red]Catalog error: {escape(str(exc))}[/red]")
        raise SystemExit(1) from exc
