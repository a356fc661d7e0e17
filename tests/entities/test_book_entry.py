"""
Tests for the BookEntry entity.
"""

import dataclasses

import pytest

from book_catalog.entities.BookEntry import BookEntry
from book_catalog.exceptions import BookEntryValidationError, NullContractError


def make_book(**overrides) -> BookEntry:
    fields = {
        "title": "Alice in Wonderland",
        "authors": ["Lewis Carroll"],
        "rating": 3.6,
        "isbn": "9780141439761",
        "pages": 250,
    }
    fields.update(overrides)
    return BookEntry(**fields)


class TestBookEntry:
    """Test cases for the BookEntry entity."""

    def test_initialization_success(self):
        """Test successful initialization with valid values."""
        book = make_book(authors=["John C.", "Elizabeth K."])

        assert book.title == "Alice in Wonderland"
        assert book.authors == ("John C.", "Elizabeth K.")
        assert book.rating == pytest.approx(3.6)
        assert book.isbn == "9780141439761"
        assert book.pages == 250

    def test_empty_authors_allowed(self):
        """Test that a book may have no authors."""
        assert make_book(authors=[]).authors == ()

    @pytest.mark.parametrize("rating", [0, 0.0, 5, 5.0])
    def test_rating_boundaries_accepted(self, rating):
        """Test ratings exactly on the boundaries."""
        assert make_book(rating=rating).rating == float(rating)

    @pytest.mark.parametrize("rating", [5.0001, -0.0001, -2.0, float("nan")])
    def test_rating_out_of_range(self, rating):
        """Test ratings outside [0, 5]."""
        with pytest.raises(BookEntryValidationError, match="Rating must be between"):
            make_book(rating=rating)

    def test_zero_pages_accepted(self):
        """Test a book with zero pages."""
        assert make_book(pages=0).pages == 0

    def test_negative_pages(self):
        """Test a book with a negative number of pages."""
        with pytest.raises(BookEntryValidationError, match="must not be negative"):
            make_book(pages=-1)

    def test_empty_title(self):
        """Test a book with an empty title."""
        with pytest.raises(BookEntryValidationError, match="Title must not be empty"):
            make_book(title="")

    @pytest.mark.parametrize("field", ["title", "authors", "isbn"])
    def test_missing_field(self, field):
        """Test that a None field raises the null-contract error."""
        with pytest.raises(NullContractError):
            make_book(**{field: None})

    def test_none_author_entry(self):
        """Test that a None author raises the null-contract error."""
        with pytest.raises(NullContractError, match="Authors entries"):
            make_book(authors=["abc", "agd", None])

    def test_empty_author_entry(self):
        """Test that an empty author name is rejected."""
        with pytest.raises(BookEntryValidationError, match="Authors entries must not be empty"):
            make_book(authors=[""])

    def test_errors_are_distinguishable(self):
        """Test missing and out-of-range values raise different errors."""
        assert not issubclass(NullContractError, BookEntryValidationError)
        assert not issubclass(BookEntryValidationError, NullContractError)

    def test_immutable(self):
        """Test that fields cannot be reassigned."""
        book = make_book()
        with pytest.raises(dataclasses.FrozenInstanceError):
            book.title = "Other"  # type: ignore[misc]

    def test_authors_copied(self):
        """Test that mutating the source list does not change the entry."""
        authors = ["Lewis Carroll"]
        book = make_book(authors=authors)
        authors.append("Someone Else")

        assert book.authors == ("Lewis Carroll",)

    def test_structural_equality(self):
        """Test that entries with the same values are equal and hash alike."""
        a = make_book(authors=["A", "B"])
        b = make_book(authors=("A", "B"))

        assert a == b
        assert hash(a) == hash(b)
        assert a != make_book(authors=["B", "A"])
        assert a != make_book(authors=["A", "B"], pages=251)

    def test_has_author(self):
        """Test exact author matching."""
        book = make_book(authors=["Terry Pratchett", "Neil Gaiman"])

        assert book.has_author("Neil Gaiman")
        assert not book.has_author("neil gaiman")
        assert not book.has_author("Neil")

    def test_str_representation(self):
        """Test the canonical multi-line rendering."""
        book = make_book(authors=["John C.", "Elizabeth K."])

        assert str(book) == (
            "Alice in Wonderland\n"
            "by John C., Elizabeth K.\n"
            "Rating: 3.60\n"
            "ISBN: 9780141439761\n"
            "250 pages"
        )

    def test_str_is_stable(self):
        """Test that rendering the same entry twice gives the same text."""
        book = make_book()
        assert str(book) == str(book) == str(make_book())
