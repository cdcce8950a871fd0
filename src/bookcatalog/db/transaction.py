# ABOUTME: Scoped transactions and pessimistic record locks over a SQLite connection.
# ABOUTME: Guarantees commit-or-rollback on every exit path and maps sqlite3 errors to StorageError.

import logging
import sqlite3
from collections.abc import Iterator
from contextlib import contextmanager
from types import TracebackType

logger = logging.getLogger(__name__)


class StorageError(Exception):
    """Raised when the catalog database rejects or fails a query."""


class LockTimeoutError(StorageError):
    """Raised when another session held the write lock past the lock timeout."""


def _is_lock_error(exc: sqlite3.Error) -> bool:
    message = str(exc).lower()
    return isinstance(exc, sqlite3.OperationalError) and (
        "database is locked" in message or "database is busy" in message
    )


@contextmanager
def translate_errors() -> Iterator[None]:
    """Re-raise sqlite3 errors as StorageError (or LockTimeoutError)."""
    try:
        yield
    except sqlite3.Error as exc:
        if _is_lock_error(exc):
            raise LockTimeoutError(str(exc)) from exc
        raise StorageError(str(exc)) from exc


class Transaction:
    """An explicit transaction on a connection opened with isolation_level=None.

    Used as a context manager, it begins on entry, commits when the block
    finishes and rolls back when the block raises. The exception is always
    re-raised after the rollback.
    """

    def __init__(self, conn: sqlite3.Connection, *, immediate: bool = True) -> None:
        self._conn = conn
        self._immediate = immediate

    @property
    def active(self) -> bool:
        return self._conn.in_transaction

    def begin(self) -> None:
        """Start the transaction.

        An immediate transaction takes the database write lock up front and
        waits up to the connection's busy timeout for it.

        Raises:
            StorageError: If a transaction is already open on this connection.
            LockTimeoutError: If the write lock could not be obtained in time.
        """
        if self._conn.in_transaction:
            raise StorageError("A transaction is already open on this connection")
        with translate_errors():
            self._conn.execute("BEGIN IMMEDIATE" if self._immediate else "BEGIN")

    def commit(self) -> None:
        if not self._conn.in_transaction:
            return
        try:
            with translate_errors():
                self._conn.execute("COMMIT")
        except StorageError:
            self.rollback()
            raise

    def rollback(self) -> None:
        if not self._conn.in_transaction:
            return
        with translate_errors():
            self._conn.execute("ROLLBACK")

    def __enter__(self) -> "Transaction":
        self.begin()
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        if exc_type is None:
            self.commit()
        else:
            logger.warning("Rolling back transaction after %s", exc_type.__name__)
            self.rollback()


class RecordLock:
    """Pessimistic write lock on a single book row.

    acquire() opens an immediate transaction and reads the row, which is
    SQLite's counterpart of SELECT ... FOR UPDATE: no other session can write
    until release() commits or rolls back. The lock moves between exactly two
    states, unlocked and locked; a failed acquire leaves it unlocked.
    """

    def __init__(self, conn: sqlite3.Connection) -> None:
        self._conn = conn
        self._transaction = Transaction(conn, immediate=True)
        self._book_id: int | None = None

    @property
    def locked(self) -> bool:
        return self._book_id is not None and self._conn.in_transaction

    @property
    def book_id(self) -> int | None:
        return self._book_id if self.locked else None

    def acquire(self, book_id: int) -> None:
        """Lock the row for book_id, blocking up to the lock timeout.

        Raises:
            LockTimeoutError: If another session holds the write lock.
            StorageError: On any other database failure.
            ValueError: If no book with book_id exists.
        """
        self._transaction.begin()
        try:
            with translate_errors():
                row = self._conn.execute(
                    "SELECT id FROM Books WHERE id = ?", (book_id,)
                ).fetchone()
            if row is None:
                raise ValueError(f"Book with id {book_id} not found")
        except BaseException:
            self._transaction.rollback()
            raise
        self._book_id = book_id
        logger.debug("Locked book %d", book_id)

    def release(self, commit: bool = True) -> None:
        """Commit (or roll back) and drop the lock. No-op when nothing is held."""
        if not self._conn.in_transaction:
            self._book_id = None
            return
        book_id = self._book_id
        try:
            if commit:
                self._transaction.commit()
            else:
                self._transaction.rollback()
        finally:
            self._book_id = None
        logger.debug("Released lock on book %s (%s)", book_id, "commit" if commit else "rollback")

    @contextmanager
    def held(self, book_id: int) -> Iterator["RecordLock"]:
        """Hold the lock for the duration of a block.

        Commits when the block completes and rolls back if it raises.
        """
        self.acquire(book_id)
        try:
            yield self
        except BaseException as exc:
            logger.warning("Rolling back edit of book %d after %s", book_id, type(exc).__name__)
            self.release(commit=False)
            raise
        self.release(commit=True)
