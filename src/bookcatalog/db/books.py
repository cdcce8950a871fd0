# ABOUTME: Table gateway for the Books and book_audit_trail tables.
# ABOUTME: Maps rows to Book records; the store is the authority on timestamps.

import logging
import sqlite3

from bookcatalog.db.mapping import BOOK_SELECT, book_to_row, row_to_audit_entry, row_to_book
from bookcatalog.db.schema import NOW
from bookcatalog.db.transaction import translate_errors
from bookcatalog.models.types import AuditEntry, Book

logger = logging.getLogger(__name__)


class BookGateway:
    """Wraps a sqlite3 connection and provides typed access to Books and their audit trail.

    The gateway never begins or commits transactions itself. Called inside a
    Transaction or RecordLock, its writes belong to that transaction; called
    outside one, each statement commits on its own.
    """

    def __init__(self, conn: sqlite3.Connection) -> None:
        self._conn = conn

    def list_books(self) -> list[Book]:
        """Return every book in the catalog, ordered by title."""
        with translate_errors():
            cursor = self._conn.execute(f"{BOOK_SELECT} ORDER BY b.title, b.id")
            return [row_to_book(row) for row in cursor.fetchall()]

    def get_by_id(self, book_id: int) -> Book | None:
        """Load a book by id, or None if it does not exist."""
        with translate_errors():
            cursor = self._conn.execute(f"{BOOK_SELECT} WHERE b.id = ?", (book_id,))
            row = cursor.fetchone()
        return row_to_book(row) if row else None

    def get_timestamps(self, book_id: int) -> tuple[str, str]:
        """Return (date_added, last_modified) exactly as stored.

        Raises:
            ValueError: If the book_id does not exist.
        """
        with translate_errors():
            row = self._conn.execute(
                "SELECT date_added, last_modified FROM Books WHERE id = ?", (book_id,)
            ).fetchone()
        if row is None:
            raise ValueError(f"Book with id {book_id} not found")
        return row["date_added"], row["last_modified"]

    def insert_book(self, book: Book) -> int:
        """Insert a new book and stamp it with the id and timestamps the store assigned.

        Both timestamps are read back from the row just written, so the
        in-memory book reflects exactly what was persisted.

        Returns:
            The row id of the inserted book.
        """
        row = book_to_row(book)
        columns = ", ".join(row.keys())
        placeholders = ", ".join("?" for _ in row)

        with translate_errors():
            cursor = self._conn.execute(
                f"INSERT INTO Books ({columns}) VALUES ({placeholders})",
                list(row.values()),
            )
        book_id: int = cursor.lastrowid  # type: ignore[assignment]

        date_added, last_modified = self.get_timestamps(book_id)
        book.mark_inserted(book_id, date_added, last_modified)
        logger.debug("Inserted book %d (%s)", book_id, book.title)
        return book_id

    def update_book(self, book: Book) -> None:
        """Write a book's fields and refresh its last_modified timestamp.

        date_added is never written, whatever the in-memory book holds.

        Raises:
            ValueError: If the book's id does not exist.
        """
        row = book_to_row(book)
        set_clause = ", ".join(f"{column} = ?" for column in row)
        set_clause += f", last_modified = {NOW}"

        with translate_errors():
            cursor = self._conn.execute(
                f"UPDATE Books SET {set_clause} WHERE id = ?",
                [*row.values(), book.id],
            )
        if cursor.rowcount == 0:
            raise ValueError(f"Book with id {book.id} not found")

        _, book.last_modified = self.get_timestamps(book.id)

    def delete_book(self, book_id: int) -> None:
        """Delete a book. Its audit trail is removed with it.

        Raises:
            ValueError: If the book_id does not exist.
        """
        with translate_errors():
            cursor = self._conn.execute("DELETE FROM Books WHERE id = ?", (book_id,))
        if cursor.rowcount == 0:
            raise ValueError(f"Book with id {book_id} not found")

    # --- Audit trail ---

    def append_audit_entry(self, book_id: int, message: str) -> int:
        """Append one entry to a book's audit trail. The store assigns the timestamp."""
        with translate_errors():
            cursor = self._conn.execute(
                "INSERT INTO book_audit_trail (book_id, entry_msg) VALUES (?, ?)",
                (book_id, message),
            )
        return cursor.lastrowid  # type: ignore[return-value]

    def fetch_audit_trail(self, book_id: int) -> list[AuditEntry]:
        """Return a book's audit entries, oldest first."""
        with translate_errors():
            cursor = self._conn.execute(
                "SELECT id, book_id, timestamp, entry_msg FROM book_audit_trail "
                "WHERE book_id = ? ORDER BY timestamp, id",
                (book_id,),
            )
            return [row_to_audit_entry(row) for row in cursor.fetchall()]
