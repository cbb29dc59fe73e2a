"""Structured logging setup.

Log events go to stderr so that the result table on stdout stays clean.
Modules obtain a logger once at import time::

    logger = get_logger(__name__)
    logger.info("catalog_loaded", path=str(path), books=3)
"""

import logging
import sys
from typing import Any

import structlog

LOG_FORMATS = ("console", "json")


def _stderr_logger(*args: Any) -> structlog.PrintLogger:
    # Resolved per call so the logger follows sys.stderr if it is swapped
    return structlog.PrintLogger(file=sys.stderr)


def configure_logging(level: str = "WARNING", log_format: str = "console") -> None:
    """Configure structlog for the current process.

    Args:
        level: Standard level name (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_format: ``console`` for human-readable lines, ``json`` for one
            JSON object per event
    """
    if log_format not in LOG_FORMATS:
        raise ValueError(f"log_format must be one of {LOG_FORMATS}, got {log_format!r}")

    renderer: Any
    if log_format == "json":
        renderer = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=False)

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(
            logging.getLevelName(level.upper())
        ),
        logger_factory=_stderr_logger,
        cache_logger_on_first_use=False,
    )


def get_logger(name: str) -> Any:
    """Return a structlog logger bound to ``name``."""
    return structlog.get_logger(name)
