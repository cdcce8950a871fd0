# ABOUTME: Model package for the book catalog: record types and field validation.
# ABOUTME: Exports Book, Publisher, AuditEntry and the validator API.

from bookcatalog.models.types import (
    UNKNOWN_PUBLISHER,
    UNKNOWN_PUBLISHER_ID,
    AuditEntry,
    Book,
    Publisher,
)
from bookcatalog.models.validation import (
    ValidationCode,
    ValidationError,
    ValidationFailure,
    ValidationResult,
    validate_book,
)

__all__ = [
    "UNKNOWN_PUBLISHER",
    "UNKNOWN_PUBLISHER_ID",
    "AuditEntry",
    "Book",
    "Publisher",
    "ValidationCode",
    "ValidationError",
    "ValidationFailure",
    "ValidationResult",
    "validate_book",
]
