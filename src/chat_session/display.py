"""
Display Formatting

Text lines shown to the user for server events and local diagnostics.
"""

from typing import Iterable, List

from .schemas import ChatMessage

LOGGED_IN = "Logged in successfully."
JOINED_ROOM = "Joined room!"
ROOM_LIST_HEADER = "CHAT ROOMS:"
INVALID_NICKNAME = "Nickname can contain letters only!"
ONLY_COMMANDS = "Only commands are supported in this state."


def command_name(command) -> str:
    """Name of a command variant, e.g. 'Join' or 'ListRooms'."""
    return type(command).__name__


def format_name_taken(nickname: str) -> str:
    return f"{nickname} is taken, choose another one!"


def format_room_list(rooms: Iterable[str]) -> List[str]:
    """Header line followed by one line per room, in the given order."""
    return [ROOM_LIST_HEADER] + [f"-> {room}" for room in rooms]


def format_chat_message(message: ChatMessage) -> str:
    return f">>> {message.sender}: {message.body}"


def format_chat_log(messages: Iterable[ChatMessage]) -> List[str]:
    return [format_chat_message(message) for message in messages]


def format_left_room(room: str) -> str:
    return f"Left {room}"


def format_parsing_error(message: str) -> str:
    return f"Parsing error occurred: {message}"


def format_unknown_command(name: str) -> str:
    return f"Unknown command: {name}"


def format_unsupported_command(command) -> str:
    return f"Command {command_name(command)} is not supported in this state."


def format_unexpected(trigger) -> str:
    return f"Unexpected message: {trigger}"
