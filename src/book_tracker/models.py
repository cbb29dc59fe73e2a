"""Data models for the book catalog.

``Book`` is a frozen pydantic model: once constructed it has passed the
field constraints and is never mutated. The remaining types are plain
dataclasses that carry results between the store, the query engine and
the CLI.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from pydantic import BaseModel, ConfigDict, Field, field_validator

from book_tracker.errors import BookCatalogError

# Copies are stored as a signed 32-bit integer
MAX_COPIES = 2**31 - 1

# Separates the fields of a catalog line
FIELD_DELIMITER = ":"
LINE_BREAKS = ("\n", "\r")


class Book(BaseModel):
    """A single catalog record."""

    model_config = ConfigDict(frozen=True)

    title: str = Field(min_length=1)
    author: str = Field(min_length=1)
    isbn: str = Field(pattern=r"^[0-9]{13}$")
    copies: int = Field(gt=0, le=MAX_COPIES)

    @field_validator("title", "author")
    @classmethod
    def validate_text_field(cls, v: str) -> str:
        # Text fields must survive a write and re-read of the catalog line
        if v != v.strip():
            raise ValueError("must not have leading or trailing whitespace")
        if FIELD_DELIMITER in v:
            raise ValueError(f"must not contain {FIELD_DELIMITER!r}")
        if any(br in v for br in LINE_BREAKS):
            raise ValueError("must not contain line breaks")
        return v


@dataclass
class LineError:
    """A catalog line that failed decoding or validation."""

    line: str
    error: BookCatalogError


@dataclass
class LoadResult:
    """Outcome of reading a catalog file.

    ``books`` keeps file order. Invalid lines never become books; they are
    reported in ``errors`` instead.
    """

    books: list[Book] = field(default_factory=list)
    errors: list[LineError] = field(default_factory=list)


@dataclass
class RunSummary:
    """Counters reported at the end of every run."""

    valid_records_processed: int = 0
    search_results: int = 0
    books_added: int = 0
    errors_encountered: int = 0
