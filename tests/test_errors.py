"""Tests for book tracker exceptions.

Tests the exception hierarchy, kind tags and message handling.
"""

import pytest

from book_tracker.errors import (
    BookCatalogError,
    CatalogIOError,
    DuplicateISBNError,
    ErrorKind,
    InsufficientArgumentsError,
    InvalidFileNameError,
    InvalidISBNError,
    MalformedBookEntryError,
)

pytestmark = pytest.mark.unit

ALL_ERRORS = [
    (InvalidISBNError, ErrorKind.INVALID_ISBN),
    (DuplicateISBNError, ErrorKind.DUPLICATE_ISBN),
    (MalformedBookEntryError, ErrorKind.MALFORMED_ENTRY),
    (InsufficientArgumentsError, ErrorKind.INSUFFICIENT_ARGUMENTS),
    (InvalidFileNameError, ErrorKind.INVALID_FILE_NAME),
    (CatalogIOError, ErrorKind.IO_FAILURE),
]


class TestBookCatalogError:
    """Tests for the base exception."""

    def test_is_exception(self):
        assert issubclass(BookCatalogError, Exception)

    def test_message_preserved(self):
        error = BookCatalogError("Custom error message")
        assert str(error) == "Custom error message"
        assert error.message == "Custom error message"

    def test_base_kind_is_unexpected(self):
        assert BookCatalogError("x").kind is ErrorKind.UNEXPECTED


class TestErrorKinds:
    """Each subclass is tagged with its own kind."""

    @pytest.mark.parametrize("cls,kind", ALL_ERRORS)
    def test_kind(self, cls, kind):
        assert cls("boom").kind is kind

    @pytest.mark.parametrize("cls,kind", ALL_ERRORS)
    def test_catchable_as_base(self, cls, kind):
        with pytest.raises(BookCatalogError) as exc_info:
            raise cls("boom")
        assert exc_info.value.message == "boom"

    def test_kinds_are_distinct(self):
        kinds = [kind for _, kind in ALL_ERRORS]
        assert len(set(kinds)) == len(kinds)
