"""
Command grouping the titles of the library by title or author.
"""

from typing_extensions import override

from book_catalog.entities.BookEntry import BookField
from book_catalog.entities.LibraryData import LibraryData
from book_catalog.exceptions import require_not_none
from book_catalog.use_cases.commands.library_command import CommandType, LibraryCommand
from book_catalog.use_cases.commands.library_utils import (
    group_titles_by_author,
    group_titles_by_first_letter,
    sorted_group_keys,
)

GROUPED_MESSAGE = "Grouped data by "
EMPTY_LIBRARY_MESSAGE = "The library has no book entries."
GROUP_HEADER = "## "


class GroupCmd(LibraryCommand):
    """
    Group command, argument is exactly TITLE or AUTHOR.

    TITLE buckets distinct titles by their first character, digits sharing
    one bucket. AUTHOR buckets titles under each of their authors. Buckets
    are printed in ascending key order, each introduced by a header line.
    """

    mode: BookField

    def __init__(self, argument_input: str):
        super().__init__(CommandType.GROUP, argument_input)

    @override
    def parse_arguments(self, argument_input: str) -> bool:
        require_not_none(argument_input, "Given input argument must not be null.")
        for field in BookField:
            if argument_input == field.value:
                self.mode = field
                return True
        return False

    @override
    def execute(self, data: LibraryData) -> None:
        require_not_none(data, "Library data must not be null.")
        books = data.get_non_null_book_data()

        if not books:
            print(EMPTY_LIBRARY_MESSAGE)
            return

        print(f"{GROUPED_MESSAGE}{self.mode.value}")
        if self.mode is BookField.TITLE:
            groups = group_titles_by_first_letter(books)
        else:
            groups = group_titles_by_author(books)

        for key in sorted_group_keys(groups):
            print(f"{GROUP_HEADER}{key}")
            for title in groups[key]:
                print(title)
