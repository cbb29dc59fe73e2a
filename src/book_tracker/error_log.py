"""Append-only error log kept beside the catalog file.

Each entry is one line::

    [2026-10-17T09:30:12.123456] INVALID: "OnlyTitle:OnlyAuthor" - MalformedBookEntryError: Book entry must ...
"""

from __future__ import annotations

from datetime import datetime
from pathlib import Path

from book_tracker.errors import CatalogIOError
from book_tracker.logging_config import get_logger

logger = get_logger(__name__)


def format_entry(offending_text: str, error: Exception, timestamp: datetime | None = None) -> str:
    """Render one error-log line (without newline)."""
    ts = (timestamp or datetime.now()).isoformat()
    message = getattr(error, "message", str(error))
    return f'[{ts}] INVALID: "{offending_text}" - {type(error).__name__}: {message}'


class ErrorLog:
    """Error log file opened in append mode for every entry."""

    def __init__(self, path: Path):
        self.path = Path(path)

    def append(self, offending_text: str, error: Exception) -> None:
        """Append one entry; the file is created if needed and never truncated.

        Raises:
            CatalogIOError: If the log cannot be written
        """
        line = format_entry(offending_text, error)
        try:
            with self.path.open("a", encoding="utf-8") as f:
                f.write(line + "\n")
        except OSError as e:
            logger.error("error_log_write_failed", path=str(self.path), error=str(e))
            raise CatalogIOError(f"Cannot write error log {self.path}: {e}") from e
