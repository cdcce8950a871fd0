# ABOUTME: Shared pytest fixtures for bookcatalog tests.
# ABOUTME: Provides temporary catalog databases, a fixed clock, and a seeded book.

import sqlite3
from collections.abc import Callable, Iterator
from datetime import datetime
from pathlib import Path

import pytest

from bookcatalog.core.editor import BookEditor
from bookcatalog.db.connection import open_catalog
from bookcatalog.models.types import Book

FIXED_NOW = datetime(2024, 6, 1, 12, 0, 0)


@pytest.fixture
def db_path(tmp_path: Path) -> Path:
    """Path to a fresh catalog database."""
    return tmp_path / "catalog.db"


@pytest.fixture
def conn(db_path: Path) -> Iterator[sqlite3.Connection]:
    """An open catalog connection with a short lock timeout."""
    connection = open_catalog(db_path, lock_timeout=0.2)
    yield connection
    connection.close()


@pytest.fixture
def other_conn(db_path: Path, conn: sqlite3.Connection) -> Iterator[sqlite3.Connection]:
    """A second session on the same database, for lock contention tests."""
    connection = open_catalog(db_path, lock_timeout=0.1)
    yield connection
    connection.close()


@pytest.fixture
def fixed_clock() -> Callable[[], datetime]:
    """A clock frozen at 2024-06-01."""
    return lambda: FIXED_NOW


@pytest.fixture
def editor(conn: sqlite3.Connection, fixed_clock: Callable[[], datetime]) -> BookEditor:
    """A BookEditor on the test catalog, validating against the fixed clock."""
    return BookEditor(conn, clock=fixed_clock)


@pytest.fixture
def dune(editor: BookEditor) -> Book:
    """A cataloged copy of Dune with the Unknown publisher."""
    result = editor.create(
        Book(
            title="Dune",
            summary="A desert planet.",
            year_published=1965,
            isbn="0441013597",
        )
    )
    assert result.ok
    assert result.book is not None
    return result.book
