"""
Base Schema Classes

This module provides base classes for request and event schemas with
common serialization and deserialization methods.

Every frame on the wire is a JSON object of the form:
    {
        "type": "message_type",
        "data": { ... message-specific data ... }
    }
Messages without fields are sent as {"type": "message_type"} only.
"""

import json
from dataclasses import asdict, fields
from typing import Any, Dict, TypeVar

T = TypeVar("T", bound="BaseEvent")


class ProtocolError(ValueError):
    """Raised when a frame received from the server cannot be decoded."""


class BaseRequest:
    """
    Base class for requests sent to the server.

    Provides common serialization methods for converting request objects
    to dictionary and JSON formats.
    """

    def to_dict(self) -> Dict[str, Any]:
        """
        Convert to dictionary for JSON serialization.

        Returns:
            Dictionary with 'type' key and optional 'data' key.
            If the request has no fields, only 'type' is included.
        """
        if hasattr(self, "__dataclass_fields__") and fields(self):
            return {"type": self.message_type, "data": asdict(self)}
        return {"type": self.message_type}

    def to_json(self) -> str:
        """Convert to JSON string."""
        return json.dumps(self.to_dict())

    @property
    def message_type(self) -> str:
        """
        Message type identifier for the request.

        Should be overridden by subclasses to provide the specific type.
        """
        raise NotImplementedError("Subclasses must define message_type")


class BaseEvent:
    """
    Base class for events pushed by the server.

    Provides common deserialization methods for creating event objects
    from dictionary and JSON formats.
    """

    @classmethod
    def from_dict(cls: type[T], data: Dict[str, Any]) -> T:
        """
        Create instance from dictionary.

        Args:
            data: Full frame dictionary, or just its 'data' part.

        Returns:
            Instance of the event class.
        """
        event_data = data.get("data", data)
        return cls._from_data(event_data)

    @classmethod
    def from_json(cls: type[T], json_str: str) -> T:
        """Create instance from JSON string."""
        data = json.loads(json_str)
        return cls.from_dict(data)

    @classmethod
    def _from_data(cls: type[T], data: Dict[str, Any]) -> T:
        """
        Create instance from the event data dictionary.

        Should be overridden by subclasses whose fields need conversion.
        Fields that are not part of the dataclass are ignored.
        """
        names = {f.name for f in fields(cls)}
        return cls(**{k: v for k, v in data.items() if k in names})
