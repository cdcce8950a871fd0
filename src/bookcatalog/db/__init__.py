# ABOUTME: Public API for the book catalog database layer.
# ABOUTME: Exports connection management, table gateways, transactions, and storage errors.

from bookcatalog.db.books import BookGateway
from bookcatalog.db.connection import connect, open_catalog
from bookcatalog.db.publishers import PublisherGateway
from bookcatalog.db.transaction import (
    LockTimeoutError,
    RecordLock,
    StorageError,
    Transaction,
)

__all__ = [
    "BookGateway",
    "LockTimeoutError",
    "PublisherGateway",
    "RecordLock",
    "StorageError",
    "Transaction",
    "connect",
    "open_catalog",
]
