# ABOUTME: Edit sessions for cataloged books: validate, lock, diff, audit, and persist.
# ABOUTME: The entry point the presentation layer calls to create, save, and inspect books.

import logging
import sqlite3
from dataclasses import dataclass, field, replace
from datetime import datetime

from bookcatalog.core.audit import BookChanges, apply_changes, diff_book
from bookcatalog.db.books import BookGateway
from bookcatalog.db.publishers import PublisherGateway
from bookcatalog.db.transaction import RecordLock, Transaction
from bookcatalog.models.types import AuditEntry, Book, Publisher
from bookcatalog.models.validation import Clock, ValidationResult, validate_book

logger = logging.getLogger(__name__)


@dataclass
class SaveResult:
    """Outcome of a save.

    On success book is the saved record and audit_messages lists the entries
    written. On a validation failure book is None, validation holds the
    reasons and nothing was written.
    """

    book: Book | None = None
    validation: ValidationResult = field(default_factory=ValidationResult)
    audit_messages: list[str] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return self.book is not None and self.validation.ok


class BookEditor:
    """Coordinates validation, locking, change auditing and persistence for books.

    An editor owns no connection of its own; it works on the session's
    connection and never shares an open transaction with another session.
    Storage failures roll back any open transaction and propagate as
    StorageError (or LockTimeoutError).
    """

    def __init__(self, conn: sqlite3.Connection, *, clock: Clock = datetime.now) -> None:
        self._conn = conn
        self._clock = clock
        self._lock = RecordLock(conn)
        self.books = BookGateway(conn)
        self.publishers = PublisherGateway(conn)

    def validate(self, book: Book) -> ValidationResult:
        return validate_book(book, clock=self._clock)

    def load(self, book_id: int) -> Book | None:
        return self.books.get_by_id(book_id)

    def list_books(self) -> list[Book]:
        return self.books.list_books()

    def list_publishers(self) -> list[Publisher]:
        return self.publishers.fetch_publishers()

    def add_publisher(self, name: str) -> Publisher:
        with Transaction(self._conn):
            return self.publishers.add_publisher(name)

    def create(self, book: Book) -> SaveResult:
        """Validate and insert a new book.

        Raises:
            ValueError: If the book already has an id.
        """
        if not book.is_new:
            raise ValueError(f"Book {book.id} is already cataloged; use save() to update it")

        validation = self.validate(book)
        if not validation.ok:
            logger.info("Rejected new book %r: %s", book.title, validation.codes)
            return SaveResult(validation=validation)

        # Stamp the caller's book only once the insert has committed
        inserted = replace(book)
        with Transaction(self._conn):
            self.books.insert_book(inserted)
        book.mark_inserted(
            inserted.id,
            inserted.date_added,  # type: ignore[arg-type]
            inserted.last_modified,  # type: ignore[arg-type]
        )

        logger.info("Added book %d (%s)", book.id, book.title)
        return SaveResult(book=book, validation=validation)

    def save(self, book: Book, changes: BookChanges | None = None) -> SaveResult:
        """Apply proposed values to a book and persist them with an audit trail.

        A new book is validated and inserted. An existing book is locked,
        compared against its stored row to produce one audit message per
        changed field, validated, then updated and audited in the same
        transaction. A validation failure writes nothing and releases the lock.

        On success the caller's book is updated in place. Its date_added is
        never changed by a save.

        Args:
            book: The book being edited.
            changes: Proposed values. Defaults to the book's current values.

        Returns:
            A SaveResult; check ok before using result.book.

        Raises:
            LockTimeoutError: If another session holds the book's lock.
            StorageError: If the database fails; the transaction is rolled back.
            ValueError: If the book no longer exists.
        """
        if changes is None:
            changes = BookChanges.from_book(book)

        candidate = replace(book)
        apply_changes(candidate, changes)

        if book.is_new:
            result = self.create(candidate)
            if result.ok:
                apply_changes(book, changes)
                book.mark_inserted(
                    candidate.id,
                    candidate.date_added,  # type: ignore[arg-type]
                    candidate.last_modified,  # type: ignore[arg-type]
                )
                result.book = book
            return result

        with self._lock.held(book.id):
            stored = self.books.get_by_id(book.id)
            if stored is None:
                raise ValueError(f"Book with id {book.id} not found")

            if changes.publisher is None:
                candidate.publisher = stored.publisher
            messages = diff_book(stored, changes)

            validation = self.validate(candidate)
            if not validation.ok:
                logger.info("Rejected update to book %d: %s", book.id, validation.codes)
                return SaveResult(validation=validation)

            self.books.update_book(candidate)
            for message in messages:
                self.books.append_audit_entry(book.id, message)

        apply_changes(book, changes)
        book.publisher = candidate.publisher
        book.last_modified = candidate.last_modified
        logger.info("Saved book %d with %d audited change(s)", book.id, len(messages))
        return SaveResult(book=book, validation=validation, audit_messages=messages)

    def delete(self, book_id: int) -> None:
        """Remove a book and its audit trail.

        Raises:
            ValueError: If the book does not exist.
        """
        with self._lock.held(book_id):
            self.books.delete_book(book_id)
        logger.info("Deleted book %d", book_id)

    def fetch_audit_trail(self, book_id: int) -> list[AuditEntry]:
        """Return a book's audit entries, oldest first."""
        return self.books.fetch_audit_trail(book_id)
