# ABOUTME: Converts between catalog records and SQLite row dictionaries.
# ABOUTME: Books are read joined with their publisher's name.

from typing import Any

from bookcatalog.models.types import AuditEntry, Book, Publisher

# Column list for reading books together with their publisher.
BOOK_SELECT = (
    "SELECT b.id, b.title, b.summary, b.year_published, b.publisher_id, b.isbn, "
    "b.date_added, b.last_modified, p.name AS publisher_name "
    "FROM Books b LEFT JOIN Publishers p ON p.id = b.publisher_id"
)


def book_to_row(book: Book) -> dict[str, Any]:
    """Convert a Book to the column values written on INSERT or UPDATE.

    Timestamps are never included: the store assigns them.
    """
    return {
        "title": book.title,
        "summary": book.summary,
        "year_published": book.year_published,
        "publisher_id": book.publisher_id,
        "isbn": book.isbn,
    }


def row_to_publisher(row: Any) -> Publisher:
    return Publisher(id=row["id"], name=row["name"])


def row_to_book(row: Any) -> Book:
    """Convert a row produced by BOOK_SELECT back to a Book."""
    publisher_name = row["publisher_name"]
    return Book(
        id=row["id"],
        title=row["title"],
        summary=row["summary"] or "",
        year_published=row["year_published"],
        isbn=row["isbn"] or "",
        publisher=Publisher(id=row["publisher_id"], name=publisher_name)
        if publisher_name is not None
        else None,
        date_added=row["date_added"],
        last_modified=row["last_modified"],
    )


def row_to_audit_entry(row: Any) -> AuditEntry:
    return AuditEntry(
        id=row["id"],
        book_id=row["book_id"],
        timestamp=row["timestamp"],
        message=row["entry_msg"],
    )
