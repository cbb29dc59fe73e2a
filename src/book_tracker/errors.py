"""Custom error types for the book tracker.

Every error carries an ``ErrorKind`` tag so the CLI boundary can map it to
an error-log entry and a console message in one place.
"""

from enum import Enum


class ErrorKind(str, Enum):
    """Classification of catalog errors."""

    INVALID_ISBN = "invalid_isbn"
    DUPLICATE_ISBN = "duplicate_isbn"
    MALFORMED_ENTRY = "malformed_entry"
    INSUFFICIENT_ARGUMENTS = "insufficient_arguments"
    INVALID_FILE_NAME = "invalid_file_name"
    IO_FAILURE = "io_failure"
    UNEXPECTED = "unexpected"


class BookCatalogError(Exception):
    """Base exception for all book tracker errors."""

    kind: ErrorKind = ErrorKind.UNEXPECTED

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class InvalidISBNError(BookCatalogError):
    """ISBN is not exactly 13 digits or contains non-numeric characters."""

    kind = ErrorKind.INVALID_ISBN


class DuplicateISBNError(BookCatalogError):
    """More than one book with the same ISBN was found.

    Only detected during ISBN lookup; signals a corrupt catalog.
    """

    kind = ErrorKind.DUPLICATE_ISBN


class MalformedBookEntryError(BookCatalogError):
    """Missing fields, empty fields, invalid copies or wrong format."""

    kind = ErrorKind.MALFORMED_ENTRY


class InsufficientArgumentsError(BookCatalogError):
    """Fewer than two command-line arguments."""

    kind = ErrorKind.INSUFFICIENT_ARGUMENTS


class InvalidFileNameError(BookCatalogError):
    """Catalog path does not carry the expected file extension."""

    kind = ErrorKind.INVALID_FILE_NAME


class CatalogIOError(BookCatalogError):
    """Error reading, creating or writing the catalog or its error log."""

    kind = ErrorKind.IO_FAILURE
