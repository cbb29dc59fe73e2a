"""Library Book Tracker - flat-file book catalog.

Public API for the record codec, validator, catalog store and query engine.
The command-line interface lives in ``book_tracker.cli``.
"""

from book_tracker.codec import decode, encode
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
from book_tracker.models import Book, LineError, LoadResult, RunSummary
from book_tracker.query import OperationKind, OperationResult, QueryEngine, classify
from book_tracker.store import CatalogStore, error_log_path
from book_tracker.validator import is_isbn13, validate

__version__ = "1.0.0"

__all__ = [
    # Records
    "Book",
    "LineError",
    "LoadResult",
    "RunSummary",
    "decode",
    "encode",
    "validate",
    "is_isbn13",
    # Storage
    "CatalogStore",
    "error_log_path",
    # Queries
    "QueryEngine",
    "OperationKind",
    "OperationResult",
    "classify",
    # Errors
    "BookCatalogError",
    "ErrorKind",
    "InvalidISBNError",
    "DuplicateISBNError",
    "MalformedBookEntryError",
    "InsufficientArgumentsError",
    "InvalidFileNameError",
    "CatalogIOError",
]
