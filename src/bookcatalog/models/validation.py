# ABOUTME: Field validation for Book records, run before any write reaches the store.
# ABOUTME: Collects every failing check into a ValidationResult; performs no I/O.

from collections.abc import Callable
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum

from bookcatalog.models.types import Book

Clock = Callable[[], datetime]

MAX_TITLE_LENGTH = 255
MAX_SUMMARY_LENGTH = 65536
MAX_ISBN_LENGTH = 13


class ValidationCode(str, Enum):
    """Reasons a book can fail validation."""

    INVALID_TITLE = "InvalidTitle"
    INVALID_SUMMARY = "InvalidSummary"
    INVALID_YEAR = "InvalidYear"
    INVALID_ISBN = "InvalidIsbn"
    DATE_NOT_ESTABLISHED = "DateNotEstablished"


@dataclass(frozen=True)
class ValidationFailure:
    """A single failed check: which field, why, and a message for display."""

    code: ValidationCode
    field: str
    reason: str


class ValidationError(Exception):
    """Raised by ValidationResult.raise_if_invalid when any check failed."""

    def __init__(self, failures: list[ValidationFailure]) -> None:
        self.failures = failures
        super().__init__("; ".join(f.reason for f in failures))

    @property
    def code(self) -> ValidationCode:
        return self.failures[0].code


@dataclass
class ValidationResult:
    """Outcome of validating one book. Failures are kept in check order."""

    failures: list[ValidationFailure] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.failures

    @property
    def first(self) -> ValidationFailure | None:
        """The first failing check, or None if the book is valid."""
        return self.failures[0] if self.failures else None

    @property
    def codes(self) -> list[ValidationCode]:
        return [f.code for f in self.failures]

    def raise_if_invalid(self) -> None:
        if self.failures:
            raise ValidationError(self.failures)


def _text_length(value: str | None) -> int:
    return len(value) if value is not None else 0


def validate_book(book: Book, *, clock: Clock = datetime.now) -> ValidationResult:
    """Check a book's fields against the catalog's constraints.

    Every check runs, in a fixed order (title, summary, year, ISBN, date added),
    so the same book always produces the same result. The current year is read
    from the clock on each call.

    Args:
        book: The candidate record.
        clock: Source of the current time, used for the year upper bound.

    Returns:
        A ValidationResult; ok is True when no check failed.
    """
    result = ValidationResult()

    title_length = _text_length(book.title)
    if not 1 <= title_length <= MAX_TITLE_LENGTH:
        result.failures.append(
            ValidationFailure(
                ValidationCode.INVALID_TITLE,
                "title",
                f"Title must be 1 to {MAX_TITLE_LENGTH} characters (got {title_length})",
            )
        )

    summary_length = _text_length(book.summary)
    if summary_length > MAX_SUMMARY_LENGTH:
        result.failures.append(
            ValidationFailure(
                ValidationCode.INVALID_SUMMARY,
                "summary",
                f"Summary must be at most {MAX_SUMMARY_LENGTH} characters "
                f"(got {summary_length})",
            )
        )

    current_year = clock().year
    if not 0 <= book.year_published <= current_year:
        result.failures.append(
            ValidationFailure(
                ValidationCode.INVALID_YEAR,
                "year_published",
                f"Year published must be between 0 and {current_year} "
                f"(got {book.year_published})",
            )
        )

    isbn_length = _text_length(book.isbn)
    if isbn_length > MAX_ISBN_LENGTH:
        result.failures.append(
            ValidationFailure(
                ValidationCode.INVALID_ISBN,
                "isbn",
                f"ISBN must be at most {MAX_ISBN_LENGTH} characters (got {isbn_length})",
            )
        )

    if not book.is_new and not book.date_added_established:
        result.failures.append(
            ValidationFailure(
                ValidationCode.DATE_NOT_ESTABLISHED,
                "date_added",
                f"Book {book.id} has no date added; load it from the catalog before saving",
            )
        )

    return result
