"""
Delimited text adapter implementation for loading catalog files.
"""

import logging
from pathlib import Path
from typing import Optional

from typing_extensions import override

from book_catalog.entities.BookEntry import BookEntry
from book_catalog.exceptions import BookParseError, require_not_none
from book_catalog.ports.files.book_source_port import BookSourcePort, PathType

FIELD_DELIMITER = ","
AUTHORS_DELIMITER = "-"

# Positions of the fields on each data line.
TITLE_POSITION = 0
AUTHORS_POSITION = 1
RATING_POSITION = 2
ISBN_POSITION = 3
PAGES_POSITION = 4
NUM_FIELDS = 5


class CsvFileLoader(BookSourcePort):
    """
    Loads book entries from a comma separated file.

    The first line is a header and is never parsed. Each following line holds
    title, authors, rating, ISBN and pages, authors being separated by a
    hyphen. Quoting and escaping are not supported: a value containing one of
    the delimiters corrupts its line.
    """

    def __init__(self, logger: logging.Logger | None = None):
        """
        Initialize the loader. No file content has been loaded yet.

        Args:
            logger: Logger instance to use for logging. If None, a default logger will be created.
        """
        self._logger: logging.Logger = logger or logging.getLogger(__name__)
        self._file_content: Optional[list[str]] = None

    @override
    def load(self, path: PathType) -> bool:
        require_not_none(path, "Given filename must not be null.")
        self._file_content = None

        try:
            text = Path(path).read_text(encoding="utf-8")
        except (OSError, ValueError) as e:
            self._logger.error(f"Reading file content failed: {e}")
            return False

        self._file_content = text.splitlines()
        self._logger.info(f"Read {len(self._file_content)} lines from {path}")
        return True

    @property
    @override
    def loaded(self) -> bool:
        return self._file_content is not None

    @override
    def parse(self) -> list[BookEntry]:
        content = self._file_content
        if content is None:
            self._logger.error("No content loaded before parsing.")
            return []

        # Column headers on the first line are not actual data.
        return [
            self._parse_line(line, line_number)
            for line_number, line in enumerate(content[1:], start=2)
        ]

    def _parse_line(self, line: str, line_number: int) -> BookEntry:
        """
        Map one data line to the corresponding book entry.

        Args:
            line: Line of the file, without line break
            line_number: 1-based position of the line in the file

        Returns:
            The parsed BookEntry

        Raises:
            BookParseError: If the field count is wrong or rating/pages are not numeric
        """
        fields = line.split(FIELD_DELIMITER)
        if len(fields) != NUM_FIELDS:
            raise BookParseError(
                f"Line {line_number}: expected {NUM_FIELDS} fields, got {len(fields)}",
                line_number,
            )

        authors_field = fields[AUTHORS_POSITION]
        authors = [a for a in authors_field.split(AUTHORS_DELIMITER) if a]

        try:
            rating = float(fields[RATING_POSITION])
            pages = int(fields[PAGES_POSITION])
        except ValueError as e:
            raise BookParseError(f"Line {line_number}: {e}", line_number) from e

        return BookEntry(
            fields[TITLE_POSITION],
            authors,
            rating,
            fields[ISBN_POSITION],
            pages,
        )
