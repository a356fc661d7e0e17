"""
Factory creating library commands from a command type and its argument.
"""

import logging
from typing import Callable, Optional, Union

from book_catalog.exceptions import InvalidCommandArgumentError, require_not_none
from book_catalog.use_cases.commands.add_books import AddCmd
from book_catalog.use_cases.commands.exit import ExitCmd
from book_catalog.use_cases.commands.group_books import GroupCmd
from book_catalog.use_cases.commands.help import HelpCmd
from book_catalog.use_cases.commands.library_command import CommandType, LibraryCommand
from book_catalog.use_cases.commands.list_books import ListCmd
from book_catalog.use_cases.commands.remove_books import RemoveCmd
from book_catalog.use_cases.commands.search_books import SearchCmd

COMMANDS: dict[CommandType, Callable[[str], LibraryCommand]] = {
    CommandType.ADD: AddCmd,
    CommandType.LIST: ListCmd,
    CommandType.SEARCH: SearchCmd,
    CommandType.REMOVE: RemoveCmd,
    CommandType.GROUP: GroupCmd,
    CommandType.HELP: HelpCmd,
    CommandType.EXIT: ExitCmd,
}


class CommandFactory:
    """Creates commands, reporting rejected input instead of raising."""

    def __init__(self, logger: Optional[logging.Logger] = None):
        """
        Initialize the factory.

        Args:
            logger: Logger used as the diagnostic channel for rejected commands
        """
        self._logger = logger or logging.getLogger(__name__)

    def create_command(
        self, cmd_type: Union[CommandType, str], argument_input: str
    ) -> Optional[LibraryCommand]:
        """
        Create the command of the given type for the given argument.

        Args:
            cmd_type: Command type, or its case-sensitive keyword
            argument_input: Raw argument text of the command

        Returns:
            The constructed command, or None if the type is not supported or
            the argument is invalid. Nothing should be executed in that case.

        Raises:
            NullContractError: If cmd_type or argument_input is None
        """
        require_not_none(cmd_type, "Given command type must not be null.")
        require_not_none(argument_input, "Given argument input must not be null.")

        try:
            constructor = COMMANDS.get(self._resolve_type(cmd_type))
            if constructor is None:
                raise InvalidCommandArgumentError(
                    f"Command type not supported: {cmd_type}"
                )
            command = constructor(argument_input)
        except InvalidCommandArgumentError as e:
            self._logger.error(str(e))
            return None

        self._logger.debug(f"Created {command!r}")
        return command

    @staticmethod
    def _resolve_type(cmd_type: Union[CommandType, str]) -> Optional[CommandType]:
        if isinstance(cmd_type, CommandType):
            return cmd_type
        return CommandType.from_keyword(cmd_type)
