"""
Command removing books from the library by title or author.
"""

from typing_extensions import override

from book_catalog.entities.BookEntry import BookEntry, BookField
from book_catalog.entities.LibraryData import LibraryData
from book_catalog.exceptions import require_not_none
from book_catalog.use_cases.commands.library_command import CommandType, LibraryCommand


class RemoveCmd(LibraryCommand):
    """
    Remove command, argument of the form "TITLE <title>" or "AUTHOR <name>".

    TITLE removes the first book whose title matches exactly. AUTHOR removes
    every book listing the name among its authors.
    """

    mode: BookField
    mode_parameter: str

    def __init__(self, argument_input: str):
        super().__init__(CommandType.REMOVE, argument_input)

    @override
    def parse_arguments(self, argument_input: str) -> bool:
        require_not_none(argument_input, "Given input argument must not be null.")

        for field in BookField:
            prefix = f"{field.value} "
            if argument_input.startswith(prefix):
                self.mode = field
                self.mode_parameter = argument_input[len(prefix):]
                return bool(self.mode_parameter.strip())
        return False

    @override
    def execute(self, data: LibraryData) -> None:
        require_not_none(data, "Library data must not be null.")
        books = data.get_non_null_book_data()

        if self.mode is BookField.TITLE:
            self._remove_title(books)
        else:
            self._remove_author(books)

    def _remove_title(self, books: list[BookEntry]) -> None:
        for index, book in enumerate(books):
            if book.title == self.mode_parameter:
                del books[index]
                print(f"{self.mode_parameter}: removed successfully.")
                return
        print(f"{self.mode_parameter}: not found.")

    def _remove_author(self, books: list[BookEntry]) -> None:
        kept = [book for book in books if not book.has_author(self.mode_parameter)]
        removed = len(books) - len(kept)
        books[:] = kept
        print(f"{removed} books removed for author: {self.mode_parameter}")
