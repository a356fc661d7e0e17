import argparse
import logging
import sys
from typing import Callable, Optional

from book_catalog.config.settings import parse_log_level, settings
from book_catalog.container import container
from book_catalog.entities.LibraryData import LibraryData
from book_catalog.exceptions import (
    BookEntryValidationError,
    ConfigurationError,
    FileLoaderError,
)
from book_catalog.use_cases.commands.command_factory import CommandFactory

LOG_FORMAT = "%(levelname)s: %(message)s"


def split_command_line(line: str) -> tuple[str, str]:
    """Split an input line into its command keyword and argument text."""
    keyword, _, argument = line.strip().partition(" ")
    return keyword, argument


class CatalogSession:
    """Read loop feeding input lines to the command factory."""

    def __init__(
        self,
        library: LibraryData,
        factory: CommandFactory,
        logger: Optional[logging.Logger] = None,
    ):
        self._library = library
        self._factory = factory
        self._logger = logger or logging.getLogger(__name__)

    def handle_line(self, line: str) -> bool:
        """
        Create and execute the command of one input line.

        Args:
            line: Raw input line, keyword first

        Returns:
            False once the session should end, True otherwise
        """
        if not line.strip():
            return True

        keyword, argument = split_command_line(line)
        command = self._factory.create_command(keyword, argument)
        if command is None:
            return True

        try:
            command.execute(self._library)
        except (FileLoaderError, BookEntryValidationError) as e:
            self._logger.error(f"Parsing catalog file failed: {e}")

        return not command.terminates_session

    def run(self, read_line: Callable[[], str]) -> None:
        """Handle lines from read_line until EXIT or end of input."""
        while True:
            try:
                line = read_line()
            except EOFError:
                break
            if not self.handle_line(line):
                break


def configure_logging(level: int, pretty: bool = False) -> None:
    if pretty:
        from rich.console import Console
        from rich.logging import RichHandler

        handler = RichHandler(
            console=Console(stderr=True), show_time=False, show_path=False
        )
        logging.basicConfig(level=level, format="%(message)s", handlers=[handler])
    else:
        logging.basicConfig(level=level, format=LOG_FORMAT, stream=sys.stderr)


def print_banner() -> None:
    from rich import box
    from rich.console import Console
    from rich.panel import Panel

    Console().print(
        Panel(
            "Type [bold]HELP[/bold] for the list of commands, [bold]EXIT[/bold] to leave.",
            title="book catalog",
            box=box.ROUNDED,
            border_style="magenta",
        )
    )


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="book-catalog",
        description="Load a book catalog and query it with library commands.",
    )
    parser.add_argument(
        "--data",
        default=settings.data_file,
        help="Catalog file (.csv) to add before reading commands",
    )
    parser.add_argument(
        "-c",
        "--command",
        action="append",
        default=[],
        help="Command to run instead of reading standard input (repeatable)",
    )
    parser.add_argument(
        "--log-level", default=None, help="Logging level (default: WARNING)"
    )
    parser.add_argument(
        "--pretty",
        action="store_true",
        help="Show a banner and colored diagnostics",
    )

    args = parser.parse_args(argv)

    try:
        level = (
            parse_log_level(args.log_level) if args.log_level else settings.log_level
        )
    except ConfigurationError as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return 2
    configure_logging(level, args.pretty)

    session = CatalogSession(
        container.get_library_data(), container.get_command_factory()
    )

    if args.data:
        session.handle_line(f"ADD {args.data}")

    if args.command:
        for line in args.command:
            if not session.handle_line(line):
                break
        return 0

    if args.pretty:
        print_banner()
    session.run(lambda: input(settings.prompt))
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
