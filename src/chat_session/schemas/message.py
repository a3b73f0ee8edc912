"""
Message Schema Definitions

This module defines the message structures for chat messages. The same
ChatMessage shape is sent by the client and pushed back by the server.
"""

from dataclasses import dataclass
from typing import Any, Dict, List

from .base import BaseEvent, BaseRequest


@dataclass
class ChatMessage(BaseRequest, BaseEvent):
    """
    A chat line in a room.

    Attributes:
        sender: Nickname of the author
        body: Message content, verbatim
    """

    sender: str
    body: str

    @property
    def message_type(self) -> str:
        return "chat_message"

    @classmethod
    def _from_data(cls, data: Dict[str, Any]) -> "ChatMessage":
        return cls(sender=data["sender"], body=data["body"])


@dataclass
class ChatLog(BaseEvent):
    """
    Event replaying the room history after a join.

    Attributes:
        messages: Earlier messages, oldest first
    """

    messages: List[ChatMessage]

    @classmethod
    def _from_data(cls, data: Dict[str, Any]) -> "ChatLog":
        messages = [
            ChatMessage._from_data(entry) for entry in data["messages"]
        ]
        return cls(messages=messages)
