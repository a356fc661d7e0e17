"""
Command contract shared by every library command.
"""

from abc import ABC, abstractmethod
from enum import Enum
from typing import Optional

from book_catalog.entities.LibraryData import LibraryData
from book_catalog.exceptions import InvalidCommandArgumentError, require_not_none


class CommandType(Enum):
    """Keywords selecting a library command."""

    ADD = "ADD"
    LIST = "LIST"
    SEARCH = "SEARCH"
    REMOVE = "REMOVE"
    GROUP = "GROUP"
    HELP = "HELP"
    EXIT = "EXIT"

    @classmethod
    def from_keyword(cls, keyword: str) -> Optional["CommandType"]:
        """Return the command type for a case-sensitive keyword, or None."""
        try:
            return cls(keyword)
        except ValueError:
            return None


class LibraryCommand(ABC):
    """
    Base class of all library commands.

    Construction validates the argument through parse_arguments, so a
    constructed command is always ready to be executed.
    """

    # Set by commands after which the surrounding session should stop.
    terminates_session: bool = False

    def __init__(self, command_type: CommandType, argument_input: str):
        """
        Initialize the command and validate its argument.

        Args:
            command_type: Type of the command
            argument_input: Raw argument text following the command keyword

        Raises:
            NullContractError: If command_type or argument_input is None
            InvalidCommandArgumentError: If parse_arguments rejects the argument
        """
        require_not_none(command_type, "Given command type must not be null.")
        require_not_none(argument_input, "Given input argument must not be null.")

        self._command_type = command_type
        self._argument_input = argument_input

        if not self.parse_arguments(argument_input):
            raise InvalidCommandArgumentError(
                f"Invalid argument for the {command_type.name} command: {argument_input}"
            )

    @property
    def command_type(self) -> CommandType:
        return self._command_type

    @property
    def argument_input(self) -> str:
        return self._argument_input

    @abstractmethod
    def parse_arguments(self, argument_input: str) -> bool:
        """
        Validate the argument and store the parameters it carries.

        Args:
            argument_input: Raw argument text

        Returns:
            True if the argument is valid for this command, False otherwise
        """
        pass

    @abstractmethod
    def execute(self, data: LibraryData) -> None:
        """
        Execute the command against the shared library.

        Args:
            data: Library the command reads or mutates

        Raises:
            NullContractError: If data is None or holds missing books
        """
        pass

    def __repr__(self) -> str:
        return f"{type(self).__name__}(argument_input={self._argument_input!r})"
