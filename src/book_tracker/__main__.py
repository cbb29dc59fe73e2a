"""Allow ``python -m book_tracker``."""

from book_tracker.cli import main

main()
