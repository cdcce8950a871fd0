# ABOUTME: Core record types for the book catalog: Book, Publisher, and AuditEntry.
# ABOUTME: Book enforces the write-once date_added invariant in memory.

from dataclasses import dataclass
from typing import Any

UNKNOWN_PUBLISHER_ID = 1
UNKNOWN_PUBLISHER_NAME = "Unknown"


@dataclass
class Publisher:
    """A publisher row. Id 1 is the well-known Unknown publisher."""

    id: int
    name: str

    @property
    def is_unknown(self) -> bool:
        """Whether this is the placeholder used when no publisher is assigned."""
        return self.id == UNKNOWN_PUBLISHER_ID


UNKNOWN_PUBLISHER = Publisher(id=UNKNOWN_PUBLISHER_ID, name=UNKNOWN_PUBLISHER_NAME)


@dataclass
class Book:
    """A cataloged book.

    A Book starts life with id 0 and no timestamps. The store assigns the id
    and both timestamps on first insert. date_added is write-once: once it
    holds a value, later assignments are ignored, so a caller can never move
    a book's creation date.
    """

    title: str
    summary: str = ""
    year_published: int = 0
    isbn: str = ""
    publisher: Publisher | None = None
    id: int = 0
    date_added: str | None = None
    last_modified: str | None = None

    def __setattr__(self, name: str, value: Any) -> None:
        if name == "date_added" and getattr(self, "date_added", None) is not None:
            return
        super().__setattr__(name, value)

    def mark_inserted(self, book_id: int, date_added: str, last_modified: str) -> None:
        """Record the id and timestamps the store assigned on first insert."""
        self.id = book_id
        object.__setattr__(self, "date_added", date_added)
        self.last_modified = last_modified

    @property
    def is_new(self) -> bool:
        """Whether this book has never been persisted."""
        return self.id == 0

    @property
    def date_added_established(self) -> bool:
        return self.date_added is not None

    @property
    def publisher_id(self) -> int:
        """The publisher foreign key, falling back to the Unknown publisher."""
        return self.publisher.id if self.publisher else UNKNOWN_PUBLISHER_ID

    def __str__(self) -> str:
        return f"{self.title} ({self.year_published})"


@dataclass
class AuditEntry:
    """One append-only line of a book's change history."""

    id: int
    book_id: int
    timestamp: str
    message: str
