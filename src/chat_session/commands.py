"""
Line Parser for Terminal Input

This module turns raw terminal lines into either a command or plain chat
text. Commands are marked with a leading backslash (the command sigil):

    \\rooms          list the rooms on the server
    \\join <room>    join a room
    \\leave          leave the current room
    \\logout         log out of the server

Anything else prefixed by the sigil is an unknown command, and anything
not prefixed is chat text.

Parsing is pure: it performs no I/O and never raises. Malformed command
syntax is reported by returning a ParsingError value.
"""

from dataclasses import dataclass
from typing import Optional, Union

COMMAND_SIGIL = "\\"


@dataclass(frozen=True)
class Join:
    """Request to join the named room."""

    room: str


@dataclass(frozen=True)
class ListRooms:
    """Request for the list of rooms."""


@dataclass(frozen=True)
class Leave:
    """Request to leave the current room."""


@dataclass(frozen=True)
class Logout:
    """Request to end the session."""


@dataclass(frozen=True)
class Unknown:
    """Sigil-prefixed token that names no known command."""

    name: str


@dataclass(frozen=True)
class ChatText:
    """Plain chat content, forwarded verbatim."""

    body: str


@dataclass(frozen=True)
class ParsingError:
    """
    Malformed command syntax.

    Attributes:
        message: Human-readable description of the problem
    """

    message: str


Command = Union[Join, ListRooms, Leave, Logout, Unknown]
ParseResult = Union[Join, ListRooms, Leave, Logout, Unknown, ChatText]


def parse_line(raw: str) -> Union[ParseResult, ParsingError]:
    """
    Parse a raw input line.

    Args:
        raw: Line as read from the terminal

    Returns:
        A Command when the first token starts with the sigil, ChatText
        otherwise, or ParsingError when a command is malformed
    """
    trimmed = raw.strip()
    if not trimmed:
        return ChatText("")

    parts = trimmed.split(None, 1)
    head = parts[0]
    remainder = parts[1] if len(parts) > 1 else None

    if head.startswith(COMMAND_SIGIL):
        return parse_command(head[len(COMMAND_SIGIL):], remainder)

    return ChatText(trimmed)


def _no_parameters(name: str) -> ParsingError:
    return ParsingError(
        f"Command: {COMMAND_SIGIL}{name} takes no parameters."
    )


def parse_command(
    name: str, arg: Optional[str]
) -> Union[Command, ParsingError]:
    """
    Interpret a command name and its optional argument text.

    Args:
        name: Command name with the sigil already stripped
        arg: Rest of the line after the command token, or None

    Returns:
        The matching Command, or ParsingError if the arguments are wrong
    """
    if name == "rooms":
        if arg is not None:
            return _no_parameters(name)
        return ListRooms()

    if name == "join":
        if arg is None or len(arg.split()) != 1:
            return ParsingError(
                f"Command: {COMMAND_SIGIL}join takes exactly one parameter."
            )
        return Join(arg.strip())

    if name == "leave":
        if arg is not None:
            return _no_parameters(name)
        return Leave()

    if name == "logout":
        if arg is not None:
            return _no_parameters(name)
        return Logout()

    return Unknown(name)
