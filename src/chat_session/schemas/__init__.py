"""
Schemas Package

This package contains protocol message schemas for client-server
communication. Schemas are organized by category: session, room, and
message operations.

The package provides base classes (BaseRequest, BaseEvent) that carry the
serialization and deserialization methods shared by every schema.
"""

from .base import BaseRequest, BaseEvent, ProtocolError
from .session import LoginRequest, LogoutRequest, LoggedIn, NameTaken
from .room import (
    ListRoomsRequest,
    JoinRoomRequest,
    LeaveRoomRequest,
    RoomList,
    Joined,
    LeftRoom,
)
from .message import ChatMessage, ChatLog
from .events import EVENT_TYPES, decode_event

__all__ = [
    # Base classes
    "BaseRequest",
    "BaseEvent",
    "ProtocolError",
    # Session schemas
    "LoginRequest",
    "LogoutRequest",
    "LoggedIn",
    "NameTaken",
    # Room schemas
    "ListRoomsRequest",
    "JoinRoomRequest",
    "LeaveRoomRequest",
    "RoomList",
    "Joined",
    "LeftRoom",
    # Message schemas
    "ChatMessage",
    "ChatLog",
    # Decoding
    "EVENT_TYPES",
    "decode_event",
]
