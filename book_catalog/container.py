"""
Dependency injection container for managing application dependencies.
"""

import logging

from book_catalog.adapters.files.csv_file_loader import CsvFileLoader
from book_catalog.entities.LibraryData import LibraryData
from book_catalog.ports.files.book_source_port import BookSourcePort
from book_catalog.use_cases.commands.command_factory import CommandFactory


class DependencyContainer:
    """
    Container for managing application dependencies using dependency injection.
    """

    def __init__(self):
        self._instances = {}
        self._logger = logging.getLogger(__name__)

    def get_file_loader(self) -> BookSourcePort:
        """
        Get catalog file loader instance.

        Returns:
            BookSourcePort implementation
        """
        if "file_loader" not in self._instances:
            self._instances["file_loader"] = CsvFileLoader(self._logger)
        return self._instances["file_loader"]

    def get_library_data(self) -> LibraryData:
        """
        Get the library shared by all commands.

        Returns:
            LibraryData backed by the file loader
        """
        if "library_data" not in self._instances:
            self._instances["library_data"] = LibraryData(
                self.get_file_loader(), self._logger
            )
        return self._instances["library_data"]

    def get_command_factory(self) -> CommandFactory:
        """
        Get command factory instance.

        Returns:
            CommandFactory reporting through the container logger
        """
        if "command_factory" not in self._instances:
            self._instances["command_factory"] = CommandFactory(self._logger)
        return self._instances["command_factory"]

    def reset(self):
        """Reset all instances (useful for testing)."""
        self._instances.clear()


# Global container instance
container = DependencyContainer()
