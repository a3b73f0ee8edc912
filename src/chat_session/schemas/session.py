"""
Session Schema Definitions

This module defines the message structures for logging in and out of the
chat server.
"""

from dataclasses import dataclass
from typing import Any, Dict

from .base import BaseEvent, BaseRequest


@dataclass
class LoginRequest(BaseRequest):
    """
    Request to log in under a nickname.

    Attributes:
        nickname: Nickname the user wants to use
    """

    nickname: str

    @property
    def message_type(self) -> str:
        return "login"


@dataclass
class LogoutRequest(BaseRequest):
    """Request to end the current session."""

    @property
    def message_type(self) -> str:
        return "logout"


@dataclass
class LoggedIn(BaseEvent):
    """
    Event confirming a successful login.

    Attributes:
        nickname: Nickname the session was opened for
        session: Opaque session handle used to address later requests
    """

    nickname: str
    session: str

    @classmethod
    def _from_data(cls, data: Dict[str, Any]) -> "LoggedIn":
        return cls(nickname=data["nickname"], session=data["session"])


@dataclass
class NameTaken(BaseEvent):
    """
    Event rejecting a login because the nickname is in use.

    Attributes:
        nickname: The rejected nickname
    """

    nickname: str

    @classmethod
    def _from_data(cls, data: Dict[str, Any]) -> "NameTaken":
        return cls(nickname=data["nickname"])
