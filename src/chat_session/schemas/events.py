"""
Server Event Decoding

Maps the 'type' field of an incoming frame to its event schema.
"""

import json
from typing import Any, Dict, Type, Union

from .base import BaseEvent, ProtocolError
from .message import ChatLog, ChatMessage
from .room import Joined, LeftRoom, RoomList
from .session import LoggedIn, NameTaken

EVENT_TYPES: Dict[str, Type[BaseEvent]] = {
    "logged_in": LoggedIn,
    "name_taken": NameTaken,
    "joined": Joined,
    "rooms_list": RoomList,
    "chat_message": ChatMessage,
    "chat_log": ChatLog,
    "left_room": LeftRoom,
}


def decode_event(frame: Union[str, bytes, Dict[str, Any]]) -> BaseEvent:
    """
    Decode one frame pushed by the server.

    Args:
        frame: Raw JSON text, or an already parsed dictionary

    Returns:
        The matching event object

    Raises:
        ProtocolError: If the frame is not valid JSON, has an unknown
            type, or lacks required fields
    """
    if isinstance(frame, (str, bytes)):
        try:
            frame = json.loads(frame)
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            raise ProtocolError(f"Invalid JSON frame: {e}") from e

    if not isinstance(frame, dict):
        raise ProtocolError("Frame must be a JSON object")

    message_type = frame.get("type")
    event_cls = EVENT_TYPES.get(message_type)
    if event_cls is None:
        raise ProtocolError(f"Unknown event type: {message_type!r}")

    try:
        return event_cls.from_dict(frame)
    except (KeyError, TypeError, AttributeError) as e:
        raise ProtocolError(
            f"Malformed {message_type} event: {e!r}"
        ) from e
