"""Tests for CatalogStore.

Tests cover:
- Bootstrap of missing catalog files and directories
- Loading in file order with blank lines skipped
- Per-line error collection
- Full rewrite on persist
"""

from pathlib import Path

import pytest

from book_tracker.errors import CatalogIOError, InvalidISBNError, MalformedBookEntryError
from book_tracker.store import CatalogStore, error_log_path

pytestmark = pytest.mark.unit


class TestEnsureExists:
    """Tests for catalog bootstrap."""

    def test_creates_file_and_parents(self, tmp_path):
        path = tmp_path / "nested" / "dir" / "books.txt"
        store = CatalogStore(path)

        store.ensure_exists()

        assert path.exists()
        assert path.read_text(encoding="utf-8") == ""

    def test_existing_file_untouched(self, catalog_path):
        before = catalog_path.read_text(encoding="utf-8")

        CatalogStore(catalog_path).ensure_exists()

        assert catalog_path.read_text(encoding="utf-8") == before

    def test_parent_is_a_file(self, tmp_path):
        blocker = tmp_path / "blocker"
        blocker.write_text("not a directory")

        with pytest.raises(CatalogIOError):
            CatalogStore(blocker / "books.txt").ensure_exists()


class TestLoad:
    """Tests for CatalogStore.load()."""

    def test_load_single_record(self, catalog_path, dune):
        result = CatalogStore(catalog_path).load()

        assert result.books == [dune]
        assert result.errors == []

    def test_keeps_file_order(self, tmp_path):
        path = tmp_path / "books.txt"
        path.write_text(
            "Zen:Pirsig:9780060589462:1\nDune:Herbert:9780441013593:3\n",
            encoding="utf-8",
        )

        result = CatalogStore(path).load()

        assert [b.title for b in result.books] == ["Zen", "Dune"]

    def test_blank_lines_skipped_silently(self, tmp_path, dune):
        path = tmp_path / "books.txt"
        path.write_text("\n   \nDune:Herbert:9780441013593:3\n\t\n", encoding="utf-8")

        result = CatalogStore(path).load()

        assert result.books == [dune]
        assert result.errors == []

    def test_crlf_line_endings(self, tmp_path, dune):
        path = tmp_path / "books.txt"
        path.write_bytes(b"Dune:Herbert:9780441013593:3\r\n")

        assert CatalogStore(path).load().books == [dune]

    def test_malformed_line_reported_and_skipped(self, tmp_path, dune):
        path = tmp_path / "books.txt"
        path.write_text(
            "OnlyTitle:OnlyAuthor\nDune:Herbert:9780441013593:3\n",
            encoding="utf-8",
        )

        result = CatalogStore(path).load()

        assert result.books == [dune]
        assert len(result.errors) == 1
        assert result.errors[0].line == "OnlyTitle:OnlyAuthor"
        assert isinstance(result.errors[0].error, MalformedBookEntryError)

    def test_error_line_is_trimmed(self, tmp_path):
        path = tmp_path / "books.txt"
        path.write_text("  Dune:Herbert:123:3  \n", encoding="utf-8")

        result = CatalogStore(path).load()

        assert result.books == []
        assert result.errors[0].line == "Dune:Herbert:123:3"
        assert isinstance(result.errors[0].error, InvalidISBNError)

    def test_missing_file_raises(self, tmp_path):
        with pytest.raises(CatalogIOError):
            CatalogStore(tmp_path / "missing.txt").load()


class TestPersist:
    """Tests for CatalogStore.persist()."""

    def test_overwrites_file(self, catalog_path, foundation):
        store = CatalogStore(catalog_path)

        store.persist([foundation])

        assert catalog_path.read_text(encoding="utf-8") == "Foundation:Asimov:9780553293357:5\n"

    def test_one_line_per_book(self, catalog_path, dune, foundation):
        store = CatalogStore(catalog_path)

        store.persist([dune, foundation])

        assert catalog_path.read_text(encoding="utf-8").splitlines() == [
            "Dune:Herbert:9780441013593:3",
            "Foundation:Asimov:9780553293357:5",
        ]

    def test_empty_list_truncates(self, catalog_path):
        CatalogStore(catalog_path).persist([])

        assert catalog_path.read_text(encoding="utf-8") == ""

    def test_persist_then_load(self, tmp_path, dune, foundation):
        store = CatalogStore(tmp_path / "books.txt")

        store.persist([dune, foundation])

        assert store.load().books == [dune, foundation]


class TestErrorLogPath:
    """Tests for error_log_path()."""

    def test_sibling_of_catalog(self, tmp_path):
        assert error_log_path(tmp_path / "books.txt") == tmp_path / "errors.log"

    def test_custom_name(self, tmp_path):
        assert error_log_path(tmp_path / "books.txt", "bad.log") == tmp_path / "bad.log"

    def test_relative_catalog_is_absolute(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)

        path = error_log_path(Path("books.txt"))

        assert path.is_absolute()
        assert path.parent == tmp_path.absolute()
