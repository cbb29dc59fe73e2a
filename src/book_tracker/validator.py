"""Field-level validation for catalog records.

Checks run in a fixed order and the first failure wins:
title, author, ISBN, copies (integer syntax), copies (positive).
"""

import re
from collections.abc import Sequence

from book_tracker.errors import InvalidISBNError, MalformedBookEntryError
from book_tracker.models import LINE_BREAKS, MAX_COPIES, Book

ISBN_LENGTH = 13
ASCII_DIGITS = frozenset("0123456789")

# Optional sign followed by ASCII digits, nothing else
INTEGER_RE = re.compile(r"[+-]?[0-9]+")
MIN_INT32 = -(2**31)


def _has_line_break(text: str) -> bool:
    return any(br in text for br in LINE_BREAKS)


def is_isbn13(text: str) -> bool:
    """Return True when ``text`` is exactly 13 ASCII digits."""
    if len(text) != ISBN_LENGTH:
        return False
    return all(ch in ASCII_DIGITS for ch in text)


def parse_copies(text: str) -> int:
    """Parse a copy count with 32-bit signed integer semantics.

    Args:
        text: Raw (already trimmed) copies field

    Returns:
        Parsed integer, which may still be zero or negative

    Raises:
        MalformedBookEntryError: If ``text`` is not a valid integer
    """
    if not INTEGER_RE.fullmatch(text):
        raise MalformedBookEntryError("Copies is not a valid integer")
    value = int(text)
    if not MIN_INT32 <= value <= MAX_COPIES:
        raise MalformedBookEntryError("Copies is not a valid integer")
    return value


def validate(fields: Sequence[str]) -> Book:
    """Validate the four fields of a record and build a ``Book``.

    Fields are trimmed before checking.

    Args:
        fields: ``(title, author, isbn, copies)`` as text

    Returns:
        The validated book

    Raises:
        MalformedBookEntryError: Empty title/author or bad copies
        InvalidISBNError: ISBN is not 13 ASCII digits

    Example:
        >>> validate(["Dune", "Herbert", "9780441013593", "3"]).copies
        3
    """
    title, author, isbn, copies_text = (f.strip() for f in fields)

    if not title:
        raise MalformedBookEntryError("Title is empty")
    if _has_line_break(title):
        raise MalformedBookEntryError("Title contains a line break")
    if not author:
        raise MalformedBookEntryError("Author is empty")
    if _has_line_break(author):
        raise MalformedBookEntryError("Author contains a line break")
    if not is_isbn13(isbn):
        raise InvalidISBNError("ISBN is not exactly 13 digits or contains non-numeric characters")

    copies = parse_copies(copies_text)
    if copies <= 0:
        raise MalformedBookEntryError("Copies must be a positive integer")

    return Book(title=title, author=author, isbn=isbn, copies=copies)
