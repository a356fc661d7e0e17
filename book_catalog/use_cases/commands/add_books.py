"""
Command adding books from a catalog file to the library.
"""

from pathlib import Path

from typing_extensions import override

from book_catalog.entities.LibraryData import LibraryData
from book_catalog.exceptions import require_not_none
from book_catalog.use_cases.commands.library_command import CommandType, LibraryCommand

EXTENSION = ".csv"


class AddCmd(LibraryCommand):
    """Add command loading book entries from a .csv file."""

    def __init__(self, argument_input: str):
        super().__init__(CommandType.ADD, argument_input)
        self.file_path = Path(argument_input)

    @override
    def parse_arguments(self, argument_input: str) -> bool:
        require_not_none(argument_input, "Given input argument must not be null.")
        return argument_input.endswith(EXTENSION)

    @override
    def execute(self, data: LibraryData) -> None:
        require_not_none(data, "Library data must not be null.")
        data.load_data(self.file_path)
