"""
Command searching the library for titles containing a phrase.
"""

from typing_extensions import override

from book_catalog.entities.LibraryData import LibraryData
from book_catalog.exceptions import require_not_none
from book_catalog.use_cases.commands.library_command import CommandType, LibraryCommand
from book_catalog.use_cases.commands.library_utils import contains_ignore_case

NOTHING_FOUND_MESSAGE = "No hits found for search term: "


class SearchCmd(LibraryCommand):
    """Search command printing every title that contains a single-word phrase."""

    def __init__(self, argument_input: str):
        super().__init__(CommandType.SEARCH, argument_input)
        self.search_value = argument_input

    @override
    def parse_arguments(self, argument_input: str) -> bool:
        require_not_none(argument_input, "Given input argument must not be null.")
        return bool(argument_input) and not any(ch.isspace() for ch in argument_input)

    @override
    def execute(self, data: LibraryData) -> None:
        require_not_none(data, "Library data must not be null.")
        hits = [
            book.title
            for book in data.get_non_null_book_data()
            if contains_ignore_case(book.title, self.search_value)
        ]

        if not hits:
            print(f"{NOTHING_FOUND_MESSAGE}{self.search_value}")
            return

        for title in hits:
            print(title)
