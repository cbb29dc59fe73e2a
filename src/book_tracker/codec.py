"""Record codec: catalog line <-> ``Book``.

A catalog line is ``Title:Author:ISBN:Copies``. Splitting keeps empty
fields, so ``"a:b:c:"`` has four fields and ``"a:b"`` has two.
"""

from book_tracker.errors import MalformedBookEntryError
from book_tracker.models import FIELD_DELIMITER, Book
from book_tracker.validator import validate

FIELD_COUNT = 4


def split_fields(line: str) -> list[str]:
    """Split a line on the delimiter, preserving empty fields."""
    return line.split(FIELD_DELIMITER)


def decode(line: str) -> Book:
    """Parse and validate one catalog line.

    Raises:
        MalformedBookEntryError: Wrong field count or invalid field
        InvalidISBNError: ISBN field is not 13 ASCII digits
    """
    fields = split_fields(line)
    if len(fields) != FIELD_COUNT:
        raise MalformedBookEntryError(
            "Book entry must have exactly 4 fields: Title:Author:ISBN:Copies"
        )
    return validate(fields)


def encode(book: Book) -> str:
    """Serialize a book to its catalog line (no trailing newline)."""
    return FIELD_DELIMITER.join((book.title, book.author, book.isbn, str(book.copies)))
