"""
Command ending the library session.
"""

from typing_extensions import override

from book_catalog.entities.LibraryData import LibraryData
from book_catalog.exceptions import require_not_none
from book_catalog.use_cases.commands.library_command import CommandType, LibraryCommand


class ExitCmd(LibraryCommand):
    """
    Exit command. Execution leaves the library untouched; the caller stops
    its read loop when it sees terminates_session.
    """

    terminates_session = True

    def __init__(self, argument_input: str):
        super().__init__(CommandType.EXIT, argument_input)

    @override
    def parse_arguments(self, argument_input: str) -> bool:
        return not argument_input.strip()

    @override
    def execute(self, data: LibraryData) -> None:
        require_not_none(data, "Library data must not be null.")
