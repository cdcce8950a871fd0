# ABOUTME: Change detection between a stored book and a proposed set of field values.
# ABOUTME: Produces one human-readable audit message per changed field.

from dataclasses import dataclass

from bookcatalog.models.types import Book, Publisher


@dataclass(frozen=True)
class BookChanges:
    """The full set of editable values proposed for a book.

    Every field is applied on save, whether or not it differs from the
    stored value.
    """

    title: str
    summary: str = ""
    year_published: int = 0
    isbn: str = ""
    publisher: Publisher | None = None

    @classmethod
    def from_book(cls, book: Book) -> "BookChanges":
        """Changes that would leave book exactly as it is."""
        return cls(
            title=book.title,
            summary=book.summary,
            year_published=book.year_published,
            isbn=book.isbn,
            publisher=book.publisher,
        )


def _is_unset(value: str | int | None) -> bool:
    return value is None or value == ""


def _describe(label: str, old: str | int | None, new: str | int | None) -> str:
    if _is_unset(old):
        return f"{label} {new} Added"
    if _is_unset(new):
        return f"{label} {old} Removed"
    return f"{label} changed from {old} to {new}"


def _previous_publisher_name(publisher: Publisher | None) -> str | None:
    """Name of the publisher being replaced; Unknown means none was assigned."""
    if publisher is None or publisher.is_unknown:
        return None
    return publisher.name


def diff_book(current: Book, changes: BookChanges) -> list[str]:
    """Compare a stored book with proposed values and describe each difference.

    Fields are compared by value, exactly, in a fixed order: title, summary,
    ISBN, year published, publisher. Publishers are compared by id.

    Returns:
        One audit message per changed field; empty when nothing changed.
    """
    messages = []

    for label, old, new in (
        ("Title", current.title, changes.title),
        ("Summary", current.summary, changes.summary),
        ("ISBN", current.isbn, changes.isbn),
    ):
        # None and "" both mean no text
        if (old or "") != (new or ""):
            messages.append(_describe(label, old, new))

    if current.year_published != changes.year_published:
        messages.append(
            _describe("Year Published", current.year_published, changes.year_published)
        )

    # A proposed publisher of None leaves the current assignment alone
    if changes.publisher is not None and changes.publisher.id != current.publisher_id:
        messages.append(
            _describe(
                "Publisher",
                _previous_publisher_name(current.publisher),
                changes.publisher.name,
            )
        )

    return messages


def apply_changes(book: Book, changes: BookChanges) -> None:
    """Copy every proposed value onto book, changed or not."""
    book.title = changes.title
    book.summary = changes.summary
    book.year_published = changes.year_published
    book.isbn = changes.isbn
    if changes.publisher is not None:
        book.publisher = changes.publisher
