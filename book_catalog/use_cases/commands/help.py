"""
Command printing usage information.
"""

from typing_extensions import override

from book_catalog.entities.LibraryData import LibraryData
from book_catalog.exceptions import require_not_none
from book_catalog.use_cases.commands.library_command import CommandType, LibraryCommand

USAGE = {
    CommandType.ADD: "ADD <file>.csv\n    Add the books listed in a catalog file.",
    CommandType.LIST: "LIST [short|long]\n    List all books, titles only (short, default) or in full (long).",
    CommandType.SEARCH: "SEARCH <word>\n    Print the titles containing <word>, ignoring case.",
    CommandType.REMOVE: (
        "REMOVE TITLE <title> | REMOVE AUTHOR <author>\n"
        "    Remove the first book with <title>, or every book by <author>."
    ),
    CommandType.GROUP: "GROUP TITLE|AUTHOR\n    Print titles grouped by first letter or by author.",
    CommandType.HELP: "HELP [command]\n    Print this help, or the help of one command.",
    CommandType.EXIT: "EXIT\n    Leave the library.",
}

HELP_HEADER = "Available commands:"


class HelpCmd(LibraryCommand):
    """Help command; the argument optionally names the command to describe."""

    def __init__(self, argument_input: str):
        super().__init__(CommandType.HELP, argument_input)
        self.topic = argument_input.strip()

    @override
    def parse_arguments(self, argument_input: str) -> bool:
        return True

    @override
    def execute(self, data: LibraryData) -> None:
        require_not_none(data, "Library data must not be null.")

        topic = CommandType.from_keyword(self.topic.upper())
        if topic is not None:
            print(USAGE[topic])
            return

        print(HELP_HEADER)
        for usage in USAGE.values():
            print(usage)
