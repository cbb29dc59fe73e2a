"""Query engine: classify an operation string and run it.

The operation is interpreted by its shape, first match wins:

1. four delimiter-separated fields  -> add a new book
2. exactly 13 ASCII digits          -> exact ISBN lookup
3. anything else                    -> case-insensitive title search
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional

from book_tracker.codec import FIELD_COUNT, decode, split_fields
from book_tracker.errors import BookCatalogError, DuplicateISBNError
from book_tracker.logging_config import get_logger
from book_tracker.models import Book
from book_tracker.store import CatalogStore
from book_tracker.validator import is_isbn13

logger = get_logger(__name__)


class OperationKind(str, Enum):
    """Shape of an operation string."""

    ADD = "add"
    ISBN_LOOKUP = "isbn_lookup"
    TITLE_SEARCH = "title_search"


def classify(operation: str) -> OperationKind:
    """Return the kind of operation ``operation`` describes."""
    if len(split_fields(operation)) == FIELD_COUNT:
        return OperationKind.ADD
    if is_isbn13(operation):
        return OperationKind.ISBN_LOOKUP
    return OperationKind.TITLE_SEARCH


@dataclass
class OperationResult:
    """Outcome of one operation.

    ``books`` are the rows to display. ``error`` is set when a new-book
    entry was rejected; the catalog is untouched in that case.
    """

    kind: OperationKind
    books: list[Book] = field(default_factory=list)
    added: Optional[Book] = None
    error: Optional[BookCatalogError] = None


def title_sort_key(book: Book) -> str:
    return book.title.lower()


class QueryEngine:
    """Runs operations against an in-memory book list.

    The list is owned by the caller; ``add`` appends to it and re-sorts it
    in place before writing it back through the store.
    """

    def __init__(self, store: CatalogStore):
        self.store = store

    def execute(self, books: list[Book], operation: str) -> OperationResult:
        """Classify ``operation`` and dispatch it.

        Raises:
            DuplicateISBNError: ISBN lookup matched more than one book
            CatalogIOError: Persisting a new book failed
        """
        kind = classify(operation)
        logger.debug("operation_classified", operation=operation, kind=kind.value)

        if kind is OperationKind.ADD:
            return self.add(books, operation)
        if kind is OperationKind.ISBN_LOOKUP:
            found = self.find_by_isbn(books, operation)
            return OperationResult(kind=kind, books=[found] if found is not None else [])
        return OperationResult(kind=kind, books=self.search_title(books, operation))

    def add(self, books: list[Book], entry: str) -> OperationResult:
        """Validate ``entry``, append it, re-sort by title and persist.

        A rejected entry is returned as ``OperationResult.error``.
        Duplicate ISBNs are not checked here.
        """
        try:
            book = decode(entry)
        except BookCatalogError as e:
            logger.warning("book_rejected", entry=entry, kind=e.kind.value, error=e.message)
            return OperationResult(kind=OperationKind.ADD, error=e)

        books.append(book)
        books.sort(key=title_sort_key)
        self.store.persist(books)

        logger.info("book_added", title=book.title, isbn=book.isbn, catalog=str(self.store.path))
        return OperationResult(kind=OperationKind.ADD, books=[book], added=book)

    def find_by_isbn(self, books: list[Book], isbn: str) -> Optional[Book]:
        """Return the single book with ``isbn``, or None if absent.

        Raises:
            DuplicateISBNError: More than one book carries ``isbn``
        """
        matches = [b for b in books if b.isbn == isbn]
        if len(matches) > 1:
            logger.error("duplicate_isbn", isbn=isbn, matches=len(matches))
            raise DuplicateISBNError(f"More than one book with this ISBN was found: {isbn}")
        return matches[0] if matches else None

    def search_title(self, books: list[Book], keyword: str) -> list[Book]:
        """Return books whose title contains ``keyword``, ignoring case."""
        needle = keyword.lower()
        return [b for b in books if needle in b.title.lower()]
