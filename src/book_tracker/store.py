"""CatalogStore - read and rewrite the flat-file catalog.

Provides:
- Bootstrap of the catalog file and its parent directory
- Loading of all valid records, with per-line errors collected
- Full rewrite of the catalog from an ordered list of books
- Location of the sibling error log
"""

from __future__ import annotations

from pathlib import Path

from book_tracker.codec import decode, encode
from book_tracker.errors import BookCatalogError, CatalogIOError
from book_tracker.logging_config import get_logger
from book_tracker.models import Book, LineError, LoadResult

logger = get_logger(__name__)

DEFAULT_ERROR_LOG_NAME = "errors.log"


def error_log_path(catalog_path: Path, log_name: str = DEFAULT_ERROR_LOG_NAME) -> Path:
    """Return the error log path that sits next to ``catalog_path``."""
    return catalog_path.absolute().parent / log_name


class CatalogStore:
    """Storage operations for one catalog file.

    The store holds no records itself. ``load`` hands the ordered list to
    the caller, which passes it back to ``persist`` after a change.

    Example:
        >>> store = CatalogStore(Path("data/books.txt"))
        >>> store.ensure_exists()
        >>> result = store.load()
        >>> len(result.books), len(result.errors)
        (0, 0)
    """

    def __init__(self, path: Path):
        self.path = Path(path)

    def ensure_exists(self) -> None:
        """Create the parent directory and an empty catalog if missing.

        Raises:
            CatalogIOError: If the directory or file cannot be created
        """
        try:
            self.path.absolute().parent.mkdir(parents=True, exist_ok=True)
            if not self.path.exists():
                self.path.touch()
                logger.info("catalog_created", path=str(self.path))
        except OSError as e:
            logger.error("catalog_bootstrap_failed", path=str(self.path), error=str(e))
            raise CatalogIOError(f"Cannot create catalog {self.path}: {e}") from e

    def load(self) -> LoadResult:
        """Read every valid record from the catalog, in file order.

        Blank lines are skipped silently. Lines that fail decoding are
        reported in ``LoadResult.errors`` and processing continues.

        Returns:
            LoadResult with books and per-line errors

        Raises:
            CatalogIOError: If the file cannot be read
        """
        try:
            text = self.path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            logger.error("catalog_read_failed", path=str(self.path), error=str(e))
            raise CatalogIOError(f"Cannot read catalog {self.path}: {e}") from e

        result = LoadResult()
        # read_text already normalised \r\n and \r to \n
        for lineno, raw in enumerate(text.split("\n"), start=1):
            line = raw.strip()
            if not line:
                continue
            try:
                result.books.append(decode(line))
            except BookCatalogError as e:
                logger.warning(
                    "catalog_line_invalid",
                    path=str(self.path),
                    lineno=lineno,
                    kind=e.kind.value,
                    error=e.message,
                )
                result.errors.append(LineError(line=line, error=e))

        logger.info(
            "catalog_loaded",
            path=str(self.path),
            books=len(result.books),
            errors=len(result.errors),
        )
        return result

    def persist(self, books: list[Book]) -> None:
        """Overwrite the catalog with ``books``, one line each.

        Raises:
            CatalogIOError: If the file cannot be written
        """
        content = "".join(f"{encode(book)}\n" for book in books)
        try:
            self.path.write_text(content, encoding="utf-8")
        except OSError as e:
            logger.error("catalog_write_failed", path=str(self.path), error=str(e))
            raise CatalogIOError(f"Cannot write catalog {self.path}: {e}") from e

        logger.info("catalog_persisted", path=str(self.path), books=len(books))
