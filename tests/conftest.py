"""
Pytest configuration and shared fixtures.
"""

from unittest.mock import MagicMock

import pytest

from book_catalog.adapters.files.csv_file_loader import CsvFileLoader
from book_catalog.container import container
from book_catalog.entities.BookEntry import BookEntry
from book_catalog.entities.LibraryData import LibraryData

HEADER_LINE = "title,authors,rating,isbn,pages"


@pytest.fixture
def mock_logger():
    """
    Create a mock logger for testing.

    Returns:
        Mock logger instance
    """
    return MagicMock()


@pytest.fixture
def write_catalog(tmp_path):
    """
    Factory writing a catalog file with a header line and the given data lines.

    Returns:
        Callable taking data lines (and an optional file name) and returning the path
    """

    def _write(*lines: str, name: str = "books.csv"):
        path = tmp_path / name
        path.write_text("\n".join([HEADER_LINE, *lines]) + "\n", encoding="utf-8")
        return path

    return _write


@pytest.fixture
def sample_books():
    """A small catalog with shared titles and authors."""
    return [
        BookEntry("Dune", ["Frank Herbert"], 4.5, "9780441013593", 412),
        BookEntry(
            "Good Omens",
            ["Terry Pratchett", "Neil Gaiman"],
            4.25,
            "9780060853983",
            432,
        ),
        BookEntry("Mort", ["Terry Pratchett"], 4.2, "9780062225719", 320),
        BookEntry("1984", ["George Orwell"], 4.19, "9780451524935", 328),
    ]


@pytest.fixture
def empty_library(mock_logger):
    """Library with no books, backed by a real CSV loader."""
    return LibraryData(CsvFileLoader(mock_logger), mock_logger)


@pytest.fixture
def library(empty_library, sample_books):
    """Library holding the sample books."""
    empty_library.get_book_data().extend(sample_books)
    return empty_library


@pytest.fixture
def fresh_container():
    """Reset the global container around a test."""
    container.reset()
    yield container
    container.reset()
