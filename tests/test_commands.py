"""
Tests for the Line Parser

Tests for turning raw terminal lines into commands, chat text, or parsing
errors.
"""

import pytest

from chat_session.commands import (
    ChatText,
    Join,
    Leave,
    ListRooms,
    Logout,
    ParsingError,
    Unknown,
    parse_command,
    parse_line,
)


class TestParseLineChatText:
    """Lines without a sigil-prefixed first token are chat text."""

    def test_empty_line_is_empty_chat_text(self):
        """Test that an empty line yields empty chat text."""
        assert parse_line("") == ChatText("")

    def test_blank_line_is_empty_chat_text(self):
        """Test that a whitespace-only line yields empty chat text."""
        assert parse_line("   \t  ") == ChatText("")

    @pytest.mark.parametrize(
        "raw, body",
        [
            ("hello", "hello"),
            ("  hello there  ", "hello there"),
            ("hello   spaced    out", "hello   spaced    out"),
            ("join lobby", "join lobby"),
            ("a \\join lobby", "a \\join lobby"),
        ],
    )
    def test_chat_text_is_trimmed_line(self, raw, body):
        """Test that chat text equals the trimmed line."""
        assert parse_line(raw) == ChatText(body)


class TestParseLineCommands:
    """Lines whose first token starts with the sigil are commands."""

    def test_rooms(self):
        assert parse_line("\\rooms") == ListRooms()

    def test_join(self):
        assert parse_line("\\join lobby") == Join("lobby")

    def test_join_with_surrounding_whitespace(self):
        """Test that outer whitespace is ignored."""
        assert parse_line("   \\join   lobby   ") == Join("lobby")

    def test_leave(self):
        assert parse_line("\\leave") == Leave()

    def test_logout(self):
        assert parse_line("\\logout") == Logout()

    def test_unknown_command(self):
        """Test that an unrecognised name becomes Unknown."""
        assert parse_line("\\dance wildly") == Unknown("dance")

    def test_bare_sigil_is_unknown(self):
        """Test that the sigil alone is an unknown, empty command."""
        assert parse_line("\\") == Unknown("")

    def test_malformed_join_is_parsing_error(self):
        """Test that a join with two arguments is reported, not raised."""
        result = parse_line("\\join a b")
        assert isinstance(result, ParsingError)
        assert "join takes exactly one parameter" in result.message


class TestParseCommand:
    """Tests for argument checking of each command."""

    def test_rooms_without_argument(self):
        assert parse_command("rooms", None) == ListRooms()

    @pytest.mark.parametrize("arg", ["x", "a b", "lobby"])
    def test_rooms_with_argument_fails(self, arg):
        result = parse_command("rooms", arg)
        assert isinstance(result, ParsingError)
        assert "rooms takes no parameters" in result.message

    def test_join_with_one_argument(self):
        assert parse_command("join", "room1") == Join("room1")

    def test_join_with_extra_argument_fails(self):
        result = parse_command("join", "room1 extra")
        assert isinstance(result, ParsingError)
        assert "join takes exactly one parameter" in result.message

    def test_join_without_argument_fails(self):
        result = parse_command("join", None)
        assert isinstance(result, ParsingError)
        assert "join takes exactly one parameter" in result.message

    def test_leave_with_argument_fails(self):
        result = parse_command("leave", "now")
        assert isinstance(result, ParsingError)
        assert "leave takes no parameters" in result.message

    def test_logout_with_argument_fails(self):
        result = parse_command("logout", "now")
        assert isinstance(result, ParsingError)
        assert "logout takes no parameters" in result.message

    def test_unknown_never_fails(self):
        """Test that unknown commands accept any argument."""
        assert parse_command("shrug", "with arguments") == Unknown("shrug")
        assert parse_command("shrug", None) == Unknown("shrug")

    def test_names_are_case_sensitive(self):
        assert parse_command("ROOMS", None) == Unknown("ROOMS")
