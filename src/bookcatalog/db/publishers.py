# ABOUTME: Table gateway for the Publishers table.
# ABOUTME: Lists and adds publishers and reassigns a book's publisher.

import sqlite3

from bookcatalog.db.mapping import row_to_publisher
from bookcatalog.db.schema import NOW
from bookcatalog.db.transaction import translate_errors
from bookcatalog.models.types import UNKNOWN_PUBLISHER_ID, Publisher


class PublisherGateway:
    """Typed access to the Publishers table."""

    def __init__(self, conn: sqlite3.Connection) -> None:
        self._conn = conn

    def fetch_publishers(self) -> list[Publisher]:
        """Return all publishers ordered by id, Unknown first."""
        with translate_errors():
            cursor = self._conn.execute("SELECT id, name FROM Publishers ORDER BY id")
            return [row_to_publisher(row) for row in cursor.fetchall()]

    def get_by_id(self, publisher_id: int) -> Publisher | None:
        with translate_errors():
            row = self._conn.execute(
                "SELECT id, name FROM Publishers WHERE id = ?", (publisher_id,)
            ).fetchone()
        return row_to_publisher(row) if row else None

    def get_default(self) -> Publisher:
        """Return the Unknown publisher row."""
        publisher = self.get_by_id(UNKNOWN_PUBLISHER_ID)
        if publisher is None:
            raise LookupError("Catalog is missing the Unknown publisher row")
        return publisher

    def add_publisher(self, name: str) -> Publisher:
        """Insert a publisher and return it with its new id.

        Raises:
            ValueError: If name is blank.
        """
        if not name.strip():
            raise ValueError("Publisher name must not be empty")
        with translate_errors():
            cursor = self._conn.execute("INSERT INTO Publishers (name) VALUES (?)", (name,))
        return Publisher(id=cursor.lastrowid, name=name)  # type: ignore[arg-type]

    def set_book_publisher(self, book_id: int, publisher_id: int) -> None:
        """Point a book at a different publisher and refresh its last_modified.

        Raises:
            ValueError: If the book_id does not exist.
            StorageError: If publisher_id does not exist.
        """
        with translate_errors():
            cursor = self._conn.execute(
                f"UPDATE Books SET publisher_id = ?, last_modified = {NOW} WHERE id = ?",
                (publisher_id, book_id),
            )
        if cursor.rowcount == 0:
            raise ValueError(f"Book with id {book_id} not found")
