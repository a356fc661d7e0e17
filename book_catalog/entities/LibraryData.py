"""
Library data domain entity.
"""

import logging
from typing import Optional

from book_catalog.entities.BookEntry import BookEntry
from book_catalog.exceptions import NullContractError, require_not_none
from book_catalog.ports.files.book_source_port import BookSourcePort, PathType


class LibraryData:
    """
    Owner of the in-memory catalog shared by every command.

    Books are kept in insertion order (file order). The list returned by the
    accessors is the live catalog: commands prune it in place.
    """

    def __init__(
        self,
        file_loader: BookSourcePort,
        logger: Optional[logging.Logger] = None,
    ):
        """
        Initialize the library with an empty catalog.

        Args:
            file_loader: Source used to load catalog files
            logger: Logger instance to use for logging
        """
        self._file_loader = require_not_none(
            file_loader, "File loader must not be null."
        )
        self._logger = logger or logging.getLogger(__name__)
        self._book_data: list[BookEntry] = []

    def get_book_data(self) -> list[BookEntry]:
        """Return the live list of books."""
        return self._book_data

    def get_non_null_book_data(self) -> list[BookEntry]:
        """
        Return the live list of books after checking it is intact.

        Returns:
            List of books in the library

        Raises:
            NullContractError: If the list of books or any book in it is None
        """
        books = self.get_book_data()
        if books is None:
            raise NullContractError("List of books must not be null.")
        for book in books:
            if book is None:
                raise NullContractError("Book in a list must not be null.")
        return books

    def load_data(self, path: PathType) -> bool:
        """
        Load a catalog file and append its books to the library.

        The file is fully parsed before the catalog changes, so a malformed
        file leaves the library untouched.

        Args:
            path: Path of the catalog file

        Returns:
            True if the file was read and parsed, False if it could not be read

        Raises:
            NullContractError: If path is None
            BookParseError: If a data line is malformed
            BookEntryValidationError: If a data line holds out-of-range values
        """
        require_not_none(path, "Given path must not be null.")

        if not self._file_loader.load(path):
            return False

        books = self._file_loader.parse()
        self._book_data.extend(books)
        self._logger.info(f"Added {len(books)} books from {path}")
        return True
