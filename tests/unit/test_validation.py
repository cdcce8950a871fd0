# ABOUTME: Unit tests for Book field validation.
# ABOUTME: Covers length boundaries, the clock-dependent year check, and date-added presence.

from datetime import datetime

import pytest

from bookcatalog.models.types import Book
from bookcatalog.models.validation import (
    MAX_ISBN_LENGTH,
    MAX_SUMMARY_LENGTH,
    MAX_TITLE_LENGTH,
    ValidationCode,
    ValidationError,
    validate_book,
)


def _clock(year: int):
    return lambda: datetime(year, 6, 1)


def _valid_book(**overrides) -> Book:
    fields = {
        "title": "Dune",
        "summary": "A desert planet.",
        "year_published": 1965,
        "isbn": "0441013597",
    }
    fields.update(overrides)
    return Book(**fields)


class TestValidBook:
    """A book with sensible fields passes every check."""

    def test_valid_book_passes(self) -> None:
        result = validate_book(_valid_book(), clock=_clock(2024))
        assert result.ok
        assert result.failures == []
        assert result.first is None

    def test_existing_book_with_date_added_passes(self) -> None:
        """An update candidate carrying its date_added is valid."""
        book = _valid_book(id=4, date_added="2024-01-01T00:00:00.000")
        assert validate_book(book, clock=_clock(2024)).ok

    def test_raise_if_invalid_is_silent_when_ok(self) -> None:
        validate_book(_valid_book(), clock=_clock(2024)).raise_if_invalid()


class TestTitle:
    """Title length must be between 1 and 255."""

    @pytest.mark.parametrize("length", [1, MAX_TITLE_LENGTH])
    def test_boundary_lengths_pass(self, length: int) -> None:
        result = validate_book(_valid_book(title="x" * length), clock=_clock(2024))
        assert result.ok

    @pytest.mark.parametrize("length", [0, MAX_TITLE_LENGTH + 1])
    def test_out_of_range_lengths_fail(self, length: int) -> None:
        result = validate_book(_valid_book(title="x" * length), clock=_clock(2024))
        assert result.codes == [ValidationCode.INVALID_TITLE]
        assert result.first is not None
        assert result.first.field == "title"

    def test_missing_title_fails(self) -> None:
        result = validate_book(_valid_book(title=None), clock=_clock(2024))
        assert result.codes == [ValidationCode.INVALID_TITLE]


class TestSummary:
    """Summary may be empty but no longer than 65536 characters."""

    def test_max_length_passes(self) -> None:
        book = _valid_book(summary="s" * MAX_SUMMARY_LENGTH)
        assert validate_book(book, clock=_clock(2024)).ok

    def test_empty_summary_passes(self) -> None:
        assert validate_book(_valid_book(summary=""), clock=_clock(2024)).ok

    def test_too_long_fails(self) -> None:
        book = _valid_book(summary="s" * (MAX_SUMMARY_LENGTH + 1))
        result = validate_book(book, clock=_clock(2024))
        assert result.codes == [ValidationCode.INVALID_SUMMARY]


class TestYearPublished:
    """Year must be between 0 and the clock's current year."""

    @pytest.mark.parametrize("year", [0, 1965, 2024])
    def test_in_range_passes(self, year: int) -> None:
        result = validate_book(_valid_book(year_published=year), clock=_clock(2024))
        assert result.ok

    @pytest.mark.parametrize("year", [-1, 2025, 9999])
    def test_out_of_range_fails(self, year: int) -> None:
        result = validate_book(_valid_book(year_published=year), clock=_clock(2024))
        assert result.codes == [ValidationCode.INVALID_YEAR]

    def test_clock_is_read_at_validation_time(self) -> None:
        """The upper bound moves with the clock rather than being fixed."""
        now = [datetime(2024, 12, 31)]
        book = _valid_book(year_published=2025)

        assert not validate_book(book, clock=lambda: now[0]).ok
        now[0] = datetime(2025, 1, 1)
        assert validate_book(book, clock=lambda: now[0]).ok


class TestIsbn:
    """ISBN may be empty but no longer than 13 characters."""

    def test_thirteen_characters_pass(self) -> None:
        book = _valid_book(isbn="9" * MAX_ISBN_LENGTH)
        assert validate_book(book, clock=_clock(2024)).ok

    def test_fourteen_characters_fail(self) -> None:
        book = _valid_book(isbn="9" * (MAX_ISBN_LENGTH + 1))
        result = validate_book(book, clock=_clock(2024))
        assert result.codes == [ValidationCode.INVALID_ISBN]


class TestDateAdded:
    """Existing books must carry an established date_added."""

    def test_existing_book_without_date_fails(self) -> None:
        result = validate_book(_valid_book(id=4), clock=_clock(2024))
        assert result.codes == [ValidationCode.DATE_NOT_ESTABLISHED]

    def test_new_book_without_date_passes(self) -> None:
        assert validate_book(_valid_book(id=0), clock=_clock(2024)).ok


class TestMultipleFailures:
    """All failures are collected in a fixed order."""

    def test_failures_reported_in_check_order(self) -> None:
        book = Book(
            id=9,
            title="",
            summary="s" * (MAX_SUMMARY_LENGTH + 1),
            year_published=3000,
            isbn="9" * 20,
        )
        result = validate_book(book, clock=_clock(2024))

        assert result.codes == [
            ValidationCode.INVALID_TITLE,
            ValidationCode.INVALID_SUMMARY,
            ValidationCode.INVALID_YEAR,
            ValidationCode.INVALID_ISBN,
            ValidationCode.DATE_NOT_ESTABLISHED,
        ]
        assert result.first is not None
        assert result.first.code == ValidationCode.INVALID_TITLE

    def test_raise_if_invalid_carries_failures(self) -> None:
        result = validate_book(_valid_book(title="", isbn="9" * 20), clock=_clock(2024))

        with pytest.raises(ValidationError) as exc_info:
            result.raise_if_invalid()

        assert exc_info.value.code == ValidationCode.INVALID_TITLE
        assert len(exc_info.value.failures) == 2
        assert "Title" in str(exc_info.value)
        assert "ISBN" in str(exc_info.value)

    def test_codes_use_taxonomy_names(self) -> None:
        """Codes carry the names presentation layers match on."""
        assert ValidationCode.INVALID_YEAR.value == "InvalidYear"
        assert ValidationCode.DATE_NOT_ESTABLISHED.value == "DateNotEstablished"
