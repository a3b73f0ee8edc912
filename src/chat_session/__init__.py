"""
Chat Session Client Package

This package provides the client side of the chat system: the line parser
for terminal input, the session state machine, the WebSocket transport to
the chat server, and the session runner that ties them together.

Schemas are organized in the `schemas` subpackage by category:
    - session: Login and logout
    - room: Room listing, joining and leaving
    - message: Chat messages and room history
"""

from .commands import (
    COMMAND_SIGIL,
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
from .state import (
    ConvData,
    Display,
    InputLine,
    SendToServer,
    SessionData,
    State,
    Transition,
    Uninitialized,
    initial_transition,
    step,
)
from .service import ClientService
from .session import STOP_SENTINEL, ChatSession
from .config import ClientConfig

__all__ = [
    # Line parser
    "COMMAND_SIGIL",
    "ChatText",
    "Join",
    "Leave",
    "ListRooms",
    "Logout",
    "ParsingError",
    "Unknown",
    "parse_command",
    "parse_line",
    # State machine
    "ConvData",
    "Display",
    "InputLine",
    "SendToServer",
    "SessionData",
    "State",
    "Transition",
    "Uninitialized",
    "initial_transition",
    "step",
    # Runtime
    "ClientService",
    "ChatSession",
    "STOP_SENTINEL",
    "ClientConfig",
]
