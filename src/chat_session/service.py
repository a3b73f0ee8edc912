"""
Client Service for the Chat Server Connection

This module provides the transport used by the session: a WebSocket
connection to the chat server over which requests are sent and server
events are received.

Architecture:
    - Uses WebSocket for real-time bidirectional communication
    - Supports dependency injection for the network layer (for testability)
    - Async/await pattern for non-blocking I/O operations
    - Requests are fire-and-forget; replies arrive as server events
"""

import json
import logging
from typing import AsyncIterator, Callable, Optional

import websockets

from .schemas import BaseEvent, BaseRequest, ProtocolError, decode_event

logger = logging.getLogger(__name__)


class ClientService:
    """
    Connection to the chat server.

    Attributes:
        server_url: WebSocket URL of the server (e.g., ws://localhost:2551)
        websocket: Active WebSocket connection (None if not connected)
    """

    def __init__(
        self,
        server_url: str,
        websocket_factory: Optional[Callable] = None,
    ):
        """
        Initialize the client service.

        Args:
            server_url: WebSocket URL of the chat server
            websocket_factory: Optional factory for creating WebSocket
                             connections (for dependency injection/testing)
        """
        self.server_url = server_url
        self.websocket = None
        self._websocket_factory = websocket_factory or websockets.connect
        self._connected = False

        logger.info("ClientService initialized for server: %s", server_url)

    async def connect(self) -> None:
        """
        Establish WebSocket connection to the chat server.

        Raises:
            ConnectionError: If connection fails
        """
        try:
            logger.info("Connecting to %s...", self.server_url)
            self.websocket = await self._websocket_factory(self.server_url)
            self._connected = True
            logger.info("Successfully connected to chat server")
        except (OSError, websockets.exceptions.WebSocketException) as e:
            logger.error("Failed to connect to server: %s", e)
            raise ConnectionError(
                f"Could not connect to {self.server_url}: {e}"
            ) from e

    async def disconnect(self) -> None:
        """Close the WebSocket connection."""
        if self.websocket:
            # Only close if it's a real WebSocket connection
            if hasattr(self.websocket, "close"):
                await self.websocket.close()
            self.websocket = None
            self._connected = False
            logger.info("Disconnected from chat server")

    @property
    def is_connected(self) -> bool:
        """Check if currently connected to the server."""
        return self._connected and self.websocket is not None

    async def send(
        self, message: BaseRequest, handle: Optional[str] = None
    ) -> None:
        """
        Send a request to the server.

        This is a fire-and-forget operation. Any reply comes back through
        receive_events() as a server event.

        Args:
            message: Request to send
            handle: Session handle to address; omitted for requests to the
                    server itself (such as login)

        Raises:
            ConnectionError: If not connected to the server
        """
        if not self.is_connected:
            raise ConnectionError("Not connected to the chat server")

        frame = message.to_dict()
        if handle is not None:
            frame["session"] = handle

        logger.info("Sending %s request", message.message_type)
        try:
            await self.websocket.send(json.dumps(frame))
        except websockets.exceptions.ConnectionClosed as e:
            logger.error("Connection closed while sending: %s", e)
            self._connected = False
            raise ConnectionError(f"Connection to server closed: {e}") from e

    async def receive_events(self) -> AsyncIterator[BaseEvent]:
        """
        Yield events pushed by the server until the connection closes.

        Frames that cannot be decoded are logged and skipped.

        Raises:
            ConnectionError: If not connected to the server
        """
        if not self.is_connected:
            raise ConnectionError("Not connected to the chat server")

        logger.info("Starting event receive loop")

        try:
            async for frame in self.websocket:
                logger.debug("Received frame: %s", frame)
                try:
                    yield decode_event(frame)
                except ProtocolError as e:
                    logger.warning("Skipping malformed frame: %s", e)
        except websockets.exceptions.ConnectionClosed:
            logger.warning("Connection closed by server")
        self._connected = False

    def _set_test_mode(self, mock_websocket: object = None) -> None:
        """
        Set the service in test mode with a mock connection.

        Args:
            mock_websocket: Required mock websocket object with send and
                            async iteration

        Note: This should only be used in tests or demos.

        Raises:
            ValueError: If mock_websocket is not provided
        """
        if mock_websocket is None:
            raise ValueError("_set_test_mode requires a mock_websocket object")
        self._connected = True
        self.websocket = mock_websocket
