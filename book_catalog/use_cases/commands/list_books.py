"""
Command listing every book of the library.
"""

from typing_extensions import override

from book_catalog.entities.LibraryData import LibraryData
from book_catalog.exceptions import require_not_none
from book_catalog.use_cases.commands.library_command import CommandType, LibraryCommand

SHORT_ARG = "short"
LONG_ARG = "long"

EMPTY_MESSAGE = "The library has no book entries."
HEADER = " books in library:"


class ListCmd(LibraryCommand):
    """
    List command showing all entries of the library.

    In short mode only titles are printed, in long mode the full rendering
    of every book followed by an empty line.
    """

    mode: str

    def __init__(self, argument_input: str):
        super().__init__(CommandType.LIST, argument_input)

    @override
    def parse_arguments(self, argument_input: str) -> bool:
        require_not_none(argument_input, "Given input argument must not be null.")
        if not argument_input.strip() or argument_input == SHORT_ARG:
            self.mode = SHORT_ARG
        elif argument_input == LONG_ARG:
            self.mode = LONG_ARG
        else:
            return False
        return True

    @override
    def execute(self, data: LibraryData) -> None:
        require_not_none(data, "Library data must not be null.")
        books = data.get_non_null_book_data()

        if not books:
            print(EMPTY_MESSAGE)
            return

        print(f"{len(books)}{HEADER}")
        for book in books:
            if self.mode == SHORT_ARG:
                print(book.title)
            else:
                print(book)
                print()
