# ABOUTME: bookcatalog - a book catalog with validated, audited, lock-protected edits.
# ABOUTME: Exposes the edit session API used by the command-line interface.

from bookcatalog.config import CatalogConfig
from bookcatalog.core.audit import BookChanges
from bookcatalog.core.editor import BookEditor, SaveResult
from bookcatalog.db.transaction import LockTimeoutError, StorageError
from bookcatalog.models.types import AuditEntry, Book, Publisher
from bookcatalog.models.validation import ValidationCode, ValidationError, ValidationResult

__all__ = [
    "AuditEntry",
    "Book",
    "BookChanges",
    "BookEditor",
    "CatalogConfig",
    "LockTimeoutError",
    "Publisher",
    "SaveResult",
    "StorageError",
    "ValidationCode",
    "ValidationError",
    "ValidationResult",
]
