"""Console formatters for search results and the run summary."""

from __future__ import annotations

from book_tracker.models import Book, RunSummary

TITLE_WIDTH = 30
AUTHOR_WIDTH = 20
ISBN_WIDTH = 15
COPIES_WIDTH = 5

CLOSING_MESSAGE = "Thank you for using the Library Book Tracker."


def format_header() -> str:
    """Column header; Copies is right-aligned to match the row values."""
    return (
        f"{'Title':<{TITLE_WIDTH}} {'Author':<{AUTHOR_WIDTH}} "
        f"{'ISBN':<{ISBN_WIDTH}} {'Copies':>{COPIES_WIDTH}}"
    )


def format_row(book: Book) -> str:
    """One table row; text columns are truncated to their width."""
    return (
        f"{book.title:<{TITLE_WIDTH}.{TITLE_WIDTH}} "
        f"{book.author:<{AUTHOR_WIDTH}.{AUTHOR_WIDTH}} "
        f"{book.isbn:<{ISBN_WIDTH}.{ISBN_WIDTH}} "
        f"{book.copies:>{COPIES_WIDTH}d}"
    )


def format_table(books: list[Book]) -> str:
    """Header followed by one row per book."""
    lines = [format_header()]
    lines.extend(format_row(b) for b in books)
    return "\n".join(lines)


def format_summary(summary: RunSummary) -> str:
    """Run summary followed by the closing message."""
    return "\n".join(
        [
            "",
            f"Valid records processed: {summary.valid_records_processed}",
            f"Search results: {summary.search_results}",
            f"Books added: {summary.books_added}",
            f"Errors encountered: {summary.errors_encountered}",
            "",
            CLOSING_MESSAGE,
        ]
    )
