"""Shared fixtures for book tracker tests."""

import os

import pytest
from typer.testing import CliRunner

from book_tracker.config import get_settings
from book_tracker.models import Book

DUNE_LINE = "Dune:Herbert:9780441013593:3"


@pytest.fixture(autouse=True)
def clean_settings(monkeypatch):
    """Isolate every test from BOOK_TRACKER_* variables and cached settings."""
    for var in list(os.environ):
        if var.startswith("BOOK_TRACKER_"):
            monkeypatch.delenv(var, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def cli_runner():
    """Typer CLI runner."""
    return CliRunner()


@pytest.fixture
def dune():
    return Book(title="Dune", author="Herbert", isbn="9780441013593", copies=3)


@pytest.fixture
def foundation():
    return Book(title="Foundation", author="Asimov", isbn="9780553293357", copies=5)


@pytest.fixture
def catalog_path(tmp_path):
    """Catalog file containing a single Dune record."""
    path = tmp_path / "books.txt"
    path.write_text(DUNE_LINE + "\n", encoding="utf-8")
    return path
