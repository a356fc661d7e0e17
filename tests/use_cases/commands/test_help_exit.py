"""
Tests for the HelpCmd and ExitCmd commands.
"""

import pytest

from book_catalog.exceptions import InvalidCommandArgumentError
from book_catalog.use_cases.commands.exit import ExitCmd
from book_catalog.use_cases.commands.help import HELP_HEADER, USAGE, HelpCmd
from book_catalog.use_cases.commands.library_command import CommandType


class TestHelpCmd:
    """Test cases for the help command."""

    @pytest.mark.parametrize("argument", ["", "LIST", "anything at all"])
    def test_any_argument_accepted(self, argument):
        """Test help accepts every argument."""
        assert HelpCmd(argument).argument_input == argument

    def test_full_help(self, empty_library, capsys):
        """Test help without topic prints every command."""
        HelpCmd("").execute(empty_library)

        out = capsys.readouterr().out
        assert out.startswith(HELP_HEADER)
        for cmd_type in CommandType:
            assert USAGE[cmd_type] in out

    @pytest.mark.parametrize("topic", ["REMOVE", "remove", " Remove "])
    def test_topic_help(self, empty_library, capsys, topic):
        """Test a command topic prints only that command's usage."""
        HelpCmd(topic).execute(empty_library)

        assert capsys.readouterr().out == USAGE[CommandType.REMOVE] + "\n"

    def test_unknown_topic(self, empty_library, capsys):
        """Test an unknown topic falls back to the full help."""
        HelpCmd("unknown").execute(empty_library)

        assert capsys.readouterr().out.startswith(HELP_HEADER)


class TestExitCmd:
    """Test cases for the exit command."""

    @pytest.mark.parametrize("argument", ["", "  "])
    def test_blank_argument(self, argument):
        """Test exit takes no argument."""
        assert ExitCmd(argument).terminates_session is True

    def test_argument_rejected(self):
        """Test exit rejects any argument."""
        with pytest.raises(InvalidCommandArgumentError):
            ExitCmd("now")

    def test_execute_leaves_library(self, library, sample_books, capsys):
        """Test exit neither prints nor changes the library."""
        ExitCmd("").execute(library)

        assert capsys.readouterr().out == ""
        assert library.get_book_data() == sample_books
