"""
Custom exceptions for the application.
"""

from typing import Optional, TypeVar

T = TypeVar("T")


class BaseAppError(Exception):
    """Base exception class for application errors."""

    pass


class NullContractError(BaseAppError, TypeError):
    """Exception raised when a required reference is missing (None)."""

    pass


class BookEntryValidationError(BaseAppError, ValueError):
    """Exception raised when a book entry field is out of its allowed range."""

    pass


class InvalidCommandArgumentError(BaseAppError, ValueError):
    """Exception raised when a command argument cannot be parsed."""

    pass


class FileLoaderError(BaseAppError):
    """Exception raised for catalog file loader errors."""

    pass


class BookParseError(FileLoaderError, ValueError):
    """Exception raised when a line of a catalog file is malformed."""

    def __init__(self, message: str, line_number: int | None = None):
        super().__init__(message)
        self.line_number = line_number


class ConfigurationError(BaseAppError):
    """Exception raised for configuration errors."""

    pass


def require_not_none(value: Optional[T], message: str) -> T:
    """
    Return value unchanged, or raise NullContractError if it is None.

    Args:
        value: Reference to check
        message: Error message used when the reference is missing

    Raises:
        NullContractError: If value is None
    """
    if value is None:
        raise NullContractError(message)
    return value
