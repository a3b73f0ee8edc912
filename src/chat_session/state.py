"""
Session State Machine

This module holds the client's session state machine. A session is always
in exactly one of three states, each paired with the data valid in it:

    CONNECTING  Uninitialized         no identity yet
    CONNECTED   SessionData           logged in, not in a room
    CHATTING    ConvData              logged in and in one room

The machine is driven by triggers: InputLine for each terminal line, and
the server events defined in the schemas package. step() computes the next
(state, data) pair together with the actions to carry out (requests to
send, lines to display). It performs no I/O itself; the session runner
executes the returned actions.

Usage:
    transition = step(State.CONNECTING, Uninitialized(), InputLine("alice"))
    for action in transition.actions:
        ...
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import List, NamedTuple, Optional, Union

from . import display
from .commands import (
    ChatText,
    Join,
    Leave,
    ListRooms,
    Logout,
    ParsingError,
    Unknown,
    parse_line,
)
from .schemas import (
    BaseRequest,
    ChatLog,
    ChatMessage,
    JoinRoomRequest,
    Joined,
    LeaveRoomRequest,
    LeftRoom,
    ListRoomsRequest,
    LoggedIn,
    LoginRequest,
    LogoutRequest,
    NameTaken,
    RoomList,
)

logger = logging.getLogger(__name__)


class State(Enum):
    """Session states."""

    CONNECTING = "connecting"
    CONNECTED = "connected"
    CHATTING = "chatting"


@dataclass(frozen=True)
class Uninitialized:
    """Data of the CONNECTING state: nothing is known yet."""


@dataclass(frozen=True)
class SessionData:
    """
    Data of the CONNECTED state.

    Attributes:
        nickname: Nickname the server accepted
        server_handle: Opaque handle of the server-side session
    """

    nickname: str
    server_handle: str


@dataclass(frozen=True)
class ConvData:
    """
    Data of the CHATTING state.

    Attributes:
        nickname: Nickname the server accepted
        room: Room the user is in
        server_handle: Opaque handle of the server-side session
    """

    nickname: str
    room: str
    server_handle: str


SessionContext = Union[Uninitialized, SessionData, ConvData]


@dataclass(frozen=True)
class InputLine:
    """A raw line typed by the user."""

    line: str


@dataclass(frozen=True)
class SendToServer:
    """
    Action: send a request to the server.

    Attributes:
        message: Request to send
        handle: Session handle to address, or None for the server itself
    """

    message: BaseRequest
    handle: Optional[str] = None


@dataclass(frozen=True)
class Display:
    """Action: show one line of text to the user."""

    text: str


Action = Union[SendToServer, Display]


class Transition(NamedTuple):
    """Result of one step: the next state, its data, and actions to run."""

    state: State
    data: SessionContext
    actions: List[Action]


INITIAL_STATE = State.CONNECTING


def initial_transition() -> Transition:
    """The (state, data) pair a new client starts with."""
    return Transition(INITIAL_STATE, Uninitialized(), [])


def _show(*lines: str) -> List[Action]:
    return [Display(line) for line in lines]


def _unhandled(state: State, data: SessionContext, trigger) -> Transition:
    text = display.format_unexpected(trigger)
    logger.error(text)
    return Transition(state, data, _show(text))


def _connecting(data: Uninitialized, trigger) -> Optional[Transition]:
    if isinstance(trigger, InputLine):
        tokens = trigger.line.split()
        nickname = tokens[0] if tokens else ""
        if all(c.isalpha() for c in nickname):
            actions = [SendToServer(LoginRequest(nickname))]
        else:
            actions = _show(display.INVALID_NICKNAME)
        return Transition(State.CONNECTING, data, actions)

    if isinstance(trigger, LoggedIn):
        return Transition(
            State.CONNECTED,
            SessionData(trigger.nickname, trigger.session),
            _show(display.LOGGED_IN),
        )

    if isinstance(trigger, NameTaken):
        return Transition(
            State.CONNECTING,
            data,
            _show(display.format_name_taken(trigger.nickname)),
        )

    return None


def _connected(data: SessionData, trigger) -> Optional[Transition]:
    if isinstance(trigger, Joined):
        return Transition(
            State.CHATTING,
            ConvData(data.nickname, trigger.room, data.server_handle),
            _show(display.JOINED_ROOM),
        )

    if isinstance(trigger, RoomList):
        return Transition(
            State.CONNECTED,
            data,
            _show(*display.format_room_list(trigger.rooms)),
        )

    if not isinstance(trigger, InputLine):
        return None

    parsed = parse_line(trigger.line)
    handle = data.server_handle

    if isinstance(parsed, ParsingError):
        actions = _show(display.format_parsing_error(parsed.message))
    elif isinstance(parsed, ChatText):
        actions = _show(display.ONLY_COMMANDS)
    elif isinstance(parsed, Join):
        actions = [
            SendToServer(JoinRoomRequest(data.nickname, parsed.room), handle)
        ]
    elif isinstance(parsed, ListRooms):
        actions = [SendToServer(ListRoomsRequest(), handle)]
    elif isinstance(parsed, Logout):
        # Identity is dropped right away, without waiting for the server.
        return Transition(
            State.CONNECTING,
            Uninitialized(),
            [SendToServer(LogoutRequest(), handle)],
        )
    elif isinstance(parsed, Unknown):
        actions = _show(display.format_unknown_command(parsed.name))
    else:
        actions = _show(display.format_unsupported_command(parsed))

    return Transition(State.CONNECTED, data, actions)


def _chatting(data: ConvData, trigger) -> Optional[Transition]:
    if isinstance(trigger, ChatMessage):
        return Transition(
            State.CHATTING,
            data,
            _show(display.format_chat_message(trigger)),
        )

    if isinstance(trigger, ChatLog):
        return Transition(
            State.CHATTING,
            data,
            _show(*display.format_chat_log(trigger.messages)),
        )

    if isinstance(trigger, LeftRoom):
        return Transition(
            State.CONNECTED,
            SessionData(data.nickname, data.server_handle),
            _show(display.format_left_room(data.room)),
        )

    if not isinstance(trigger, InputLine):
        return None

    parsed = parse_line(trigger.line)
    handle = data.server_handle

    if isinstance(parsed, ParsingError):
        actions = _show(display.format_parsing_error(parsed.message))
    elif isinstance(parsed, ChatText):
        actions = [
            SendToServer(ChatMessage(data.nickname, parsed.body), handle)
        ]
    elif isinstance(parsed, Leave):
        actions = [SendToServer(LeaveRoomRequest(), handle)]
    elif isinstance(parsed, Unknown):
        actions = _show(display.format_unknown_command(parsed.name))
    else:
        actions = _show(display.format_unsupported_command(parsed))

    return Transition(State.CHATTING, data, actions)


_HANDLERS = {
    State.CONNECTING: (Uninitialized, _connecting),
    State.CONNECTED: (SessionData, _connected),
    State.CHATTING: (ConvData, _chatting),
}


def step(state: State, data: SessionContext, trigger) -> Transition:
    """
    Compute the transition for one trigger.

    The function is total: a trigger that the current state does not
    handle, or data that does not belong to the state, is logged and
    reported to the user, and the same state and data are returned.

    Args:
        state: Current state
        data: Data paired with the current state
        trigger: InputLine or a server event

    Returns:
        Transition with the next state, its data, and the actions to run
    """
    data_cls, handler = _HANDLERS[state]
    if isinstance(data, data_cls):
        transition = handler(data, trigger)
        if transition is not None:
            return transition
    return _unhandled(state, data, trigger)
