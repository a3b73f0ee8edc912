"""
Room Schema Definitions

This module defines the message structures for room-related operations
including listing, joining and leaving rooms.
"""

from dataclasses import dataclass
from typing import Any, Dict, List

from .base import BaseEvent, BaseRequest


@dataclass
class ListRoomsRequest(BaseRequest):
    """
    Request to list all rooms on the server.

    This is a simple request with no additional parameters.
    """

    @property
    def message_type(self) -> str:
        return "list_rooms"


@dataclass
class JoinRoomRequest(BaseRequest):
    """
    Request to join a room, creating it if needed.

    Attributes:
        nickname: Nickname of the joining user
        room: Name of the room to join
    """

    nickname: str
    room: str

    @property
    def message_type(self) -> str:
        return "join_room"


@dataclass
class LeaveRoomRequest(BaseRequest):
    """Request to leave the current room."""

    @property
    def message_type(self) -> str:
        return "leave_room"


@dataclass
class RoomList(BaseEvent):
    """
    Event carrying the room names known to the server.

    Attributes:
        rooms: Room names in server order
    """

    rooms: List[str]

    @classmethod
    def _from_data(cls, data: Dict[str, Any]) -> "RoomList":
        rooms = data["rooms"]
        if not isinstance(rooms, list):
            raise TypeError("rooms must be a list")
        return cls(rooms=[str(room) for room in rooms])


@dataclass
class Joined(BaseEvent):
    """
    Event confirming that the user joined a room.

    Attributes:
        room: Name of the joined room
    """

    room: str

    @classmethod
    def _from_data(cls, data: Dict[str, Any]) -> "Joined":
        return cls(room=data["room"])


@dataclass
class LeftRoom(BaseEvent):
    """Event confirming that the user left the current room."""
