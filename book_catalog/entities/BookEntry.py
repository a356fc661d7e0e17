"""
Book entry domain entity.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Iterable

from book_catalog.exceptions import BookEntryValidationError, require_not_none

MIN_RATING = 0.0
MAX_RATING = 5.0
MIN_NUM_PAGES = 0


class BookField(Enum):
    """Book fields a catalog can be grouped or pruned by."""

    TITLE = "TITLE"
    AUTHOR = "AUTHOR"


@dataclass(frozen=True, init=False)
class BookEntry:
    """
    Immutable catalog entry for a single book.

    Equality is structural: two entries are equal when every field matches,
    authors compared element by element.
    """

    title: str
    authors: tuple[str, ...]
    rating: float
    isbn: str
    pages: int

    def __init__(
        self,
        title: str,
        authors: Iterable[str],
        rating: float,
        isbn: str,
        pages: int,
    ):
        """
        Initialize the BookEntry entity.

        Args:
            title: Title of the book
            authors: Names of the authors, in order (may be empty)
            rating: Rating between 0 and 5 inclusive
            isbn: ISBN of the book
            pages: Number of pages, not negative

        Raises:
            NullContractError: If title, authors, any author or isbn is None
            BookEntryValidationError: If a value is out of its allowed range
        """
        require_not_none(title, "Title must not be null.")
        require_not_none(authors, "Authors must not be null.")
        require_not_none(isbn, "ISBN must not be null.")
        require_not_none(rating, "Rating must not be null.")
        require_not_none(pages, "Number of pages must not be null.")

        authors = tuple(authors)
        for author in authors:
            require_not_none(author, "Authors entries must not be null.")
            if not author:
                raise BookEntryValidationError("Authors entries must not be empty.")

        if not title:
            raise BookEntryValidationError("Title must not be empty.")
        if isinstance(rating, bool) or not isinstance(rating, (int, float)):
            raise BookEntryValidationError(f"Rating must be a number: {rating!r}")
        if not MIN_RATING <= rating <= MAX_RATING:
            raise BookEntryValidationError(
                f"Rating must be between {MIN_RATING:g} and {MAX_RATING:g}"
            )
        if isinstance(pages, bool) or not isinstance(pages, int):
            raise BookEntryValidationError(
                f"Number of pages must be an integer: {pages!r}"
            )
        if pages < MIN_NUM_PAGES:
            raise BookEntryValidationError("Number of pages must not be negative.")

        object.__setattr__(self, "title", title)
        object.__setattr__(self, "authors", authors)
        object.__setattr__(self, "rating", float(rating))
        object.__setattr__(self, "isbn", isbn)
        object.__setattr__(self, "pages", pages)

    def has_author(self, name: str) -> bool:
        """Check whether name is exactly one of the authors."""
        return name in self.authors

    def __str__(self) -> str:
        """Canonical multi-line rendering of the entry."""
        return "\n".join(
            [
                self.title,
                f"by {', '.join(self.authors)}",
                f"Rating: {self.rating:.2f}",
                f"ISBN: {self.isbn}",
                f"{self.pages} pages",
            ]
        )
