"""
Book source port interface defining the contract for catalog file loading.
"""

from abc import ABC, abstractmethod
from os import PathLike
from typing import Union

from book_catalog.entities.BookEntry import BookEntry

PathType = Union[str, PathLike]


class BookSourcePort(ABC):
    """Port interface for loading book entries from a source file."""

    @abstractmethod
    def load(self, path: PathType) -> bool:
        """
        Read the whole content of a source file and keep it for parsing.

        Args:
            path: Path of the source file

        Returns:
            True if the content was read, False otherwise. On failure no
            content is considered loaded.

        Raises:
            NullContractError: If path is None
        """
        pass

    @property
    @abstractmethod
    def loaded(self) -> bool:
        """Whether content has been loaded and is ready for parsing."""
        pass

    @abstractmethod
    def parse(self) -> list[BookEntry]:
        """
        Map the previously loaded content to book entries.

        Returns:
            Parsed book entries in source order, or an empty list when
            nothing has been loaded yet

        Raises:
            BookParseError: If a data line is malformed
            BookEntryValidationError: If a data line holds out-of-range values
        """
        pass
