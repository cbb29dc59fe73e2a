"""Library Book Tracker CLI - main entry point.

Provides the ``book-tracker`` command-line interface.

Usage:
    book-tracker data/books.txt "Dune"                               # title search
    book-tracker data/books.txt 9780441013593                        # ISBN lookup
    book-tracker data/books.txt "Foundation:Asimov:9780553293357:5"  # add a book

Every run ends with a summary of records processed, search results, books
added and errors encountered. Invalid catalog lines and rejected entries
are appended to ``errors.log`` next to the catalog.
"""

from pathlib import Path
from typing import List, Optional

import typer
from pydantic import ValidationError

from book_tracker.config import Settings, get_settings
from book_tracker.error_log import ErrorLog
from book_tracker.errors import (
    BookCatalogError,
    CatalogIOError,
    ErrorKind,
    InsufficientArgumentsError,
    InvalidFileNameError,
)
from book_tracker.formatters import format_summary, format_table
from book_tracker.logging_config import configure_logging, get_logger
from book_tracker.models import RunSummary
from book_tracker.query import QueryEngine
from book_tracker.store import CatalogStore, error_log_path

logger = get_logger(__name__)

NO_OPERATION_TEXT = "(no operation provided)"

app = typer.Typer(
    name="book-tracker",
    help="Maintain a flat-file book catalog: add books, look up by ISBN, search by title.",
    add_completion=False,
)


# ---------------------------------------------------------------------------
# Error dispatch
# ---------------------------------------------------------------------------


def _offending_text(kind: ErrorKind, args: list[str]) -> str:
    """Text recorded in the error log for a fatal error of ``kind``."""
    if kind is ErrorKind.IO_FAILURE:
        return "I/O operation"
    if kind is ErrorKind.UNEXPECTED:
        return "Unexpected error"
    text = args[1] if len(args) >= 2 else " ".join(args)
    return text if text.strip() else NO_OPERATION_TEXT


def _console_message(kind: ErrorKind, error: Exception) -> str:
    message = getattr(error, "message", str(error))
    if kind is ErrorKind.IO_FAILURE:
        return f"Error: I/O failure - {message}"
    if kind is ErrorKind.UNEXPECTED:
        return f"Error: Unexpected failure - {message}"
    return f"Error: {message}"


def report_failure(
    error: Exception,
    args: list[str],
    catalog_path: Optional[Path],
    settings: Settings,
) -> None:
    """Log a fatal error and print its console message.

    The error-log entry is best effort and only written once a catalog
    path is known.
    """
    kind = error.kind if isinstance(error, BookCatalogError) else ErrorKind.UNEXPECTED
    logger.error("run_failed", kind=kind.value, error=str(error))

    if catalog_path is not None:
        log = ErrorLog(error_log_path(catalog_path, settings.error_log_name))
        try:
            log.append(_offending_text(kind, args), error)
        except CatalogIOError as e:
            logger.warning("error_log_unavailable", path=str(log.path), error=e.message)

    typer.echo(_console_message(kind, error), err=True)


# ---------------------------------------------------------------------------
# Run
# ---------------------------------------------------------------------------


def run_tracker(args: list[str], summary: RunSummary, settings: Settings) -> bool:
    """Execute one invocation, updating ``summary`` as it goes.

    Per-line catalog errors and rejected entries are recovered here; every
    other error aborts the run through ``report_failure``.

    Returns:
        True if the run was aborted by a fatal error
    """
    catalog_path: Optional[Path] = None
    try:
        if len(args) < 2:
            raise InsufficientArgumentsError(
                "Fewer than two command-line arguments provided. "
                "Expected: <catalog.txt> <operation>"
            )
        catalog_arg, operation = args[0], args[1]
        if not catalog_arg.lower().endswith(settings.catalog_suffix.lower()):
            raise InvalidFileNameError(f"First argument must end with {settings.catalog_suffix}")

        catalog_path = Path(catalog_arg)
        store = CatalogStore(catalog_path)
        store.ensure_exists()
        error_log = ErrorLog(error_log_path(catalog_path, settings.error_log_name))

        loaded = store.load()
        summary.valid_records_processed = len(loaded.books)
        for line_error in loaded.errors:
            summary.errors_encountered += 1
            error_log.append(line_error.line, line_error.error)

        result = QueryEngine(store).execute(loaded.books, operation)

        if result.error is not None:
            summary.errors_encountered += 1
            error_log.append(operation, result.error)
            typer.echo(f"Error: {result.error.message}", err=True)
            return False

        typer.echo(format_table(result.books))
        if result.added is not None:
            summary.books_added = 1
        else:
            summary.search_results = len(result.books)
        return False

    except Exception as e:
        summary.errors_encountered += 1
        report_failure(e, args, catalog_path, settings)
        return True


# Operations such as "-3" are free text, not options
@app.command(context_settings={"ignore_unknown_options": True, "allow_extra_args": True})
def main_command(
    arguments: Optional[List[str]] = typer.Argument(
        None,
        metavar="CATALOG OPERATION",
        help="Catalog file (.txt), then a new book 'Title:Author:ISBN:Copies', "
        "a 13-digit ISBN, or a title keyword",
    ),
):
    """Add a book to the catalog, or look books up by ISBN or title.

    Examples:

        book-tracker books.txt dune

        book-tracker books.txt 9780441013593

        book-tracker books.txt "Foundation:Asimov:9780553293357:5"
    """
    try:
        settings = get_settings()
    except ValidationError as e:
        typer.echo(f"Error: invalid configuration - {e}", err=True)
        raise typer.Exit(2)

    configure_logging(settings.log_level, settings.log_format)

    summary = RunSummary()
    failed = run_tracker(list(arguments or []), summary, settings)
    typer.echo(format_summary(summary))

    if failed:
        raise typer.Exit(1)


def main():
    """Entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
