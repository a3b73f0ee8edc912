"""
Chat Session Runner

This module runs the session state machine against a live connection.

Terminal lines and server events are funnelled into one asyncio.Queue and
consumed by a single task, so triggers are processed strictly one at a
time: each trigger's transition and all of its actions complete before the
next trigger is taken. The (state, data) pair is owned by that task and is
only ever replaced as a whole.

Usage:
    session = ChatSession(service, display=print)
    pump = asyncio.create_task(session.pump_events())
    session.submit_line("alice")
    await session.run()
"""

import asyncio
import logging
from typing import Callable

from .service import ClientService
from .state import Display, InputLine, SendToServer, initial_transition, step

logger = logging.getLogger(__name__)

# Typing this line on its own ends the session
STOP_SENTINEL = "STOP"

_SHUTDOWN = object()


class ChatSession:
    """
    Single consumer of session triggers.

    Attributes:
        service: Connection used for outbound requests and server events
        state: Current session state
        data: Data paired with the current state
    """

    def __init__(
        self,
        service: ClientService,
        display: Callable[[str], None] = print,
    ):
        """
        Initialize the session in the CONNECTING state.

        Args:
            service: Connected ClientService
            display: Callback receiving each line to show to the user
        """
        self.service = service
        self._display = display
        self._queue: asyncio.Queue = asyncio.Queue()

        start = initial_transition()
        self.state = start.state
        self.data = start.data

    def submit_line(self, line: str) -> None:
        """Queue a terminal line, or shut down on the stop sentinel."""
        if line.strip() == STOP_SENTINEL:
            self.stop()
            return
        self._queue.put_nowait(InputLine(line))

    def submit_event(self, event) -> None:
        """Queue an event received from the server."""
        self._queue.put_nowait(event)

    def stop(self) -> None:
        """Ask run() to return once earlier triggers are processed."""
        self._queue.put_nowait(_SHUTDOWN)

    async def pump_events(self) -> None:
        """
        Forward server events into the trigger queue.

        Stops the session when the event stream ends, whether the server
        closed the connection or receiving failed.
        """
        try:
            async for event in self.service.receive_events():
                self.submit_event(event)
            logger.warning("Server event stream ended, stopping session")
        finally:
            self.stop()

    async def process(self, trigger) -> None:
        """
        Apply one trigger and carry out the resulting actions in order.

        Args:
            trigger: InputLine or a server event
        """
        transition = step(self.state, self.data, trigger)
        if transition.state is not self.state:
            logger.info(
                "Session state %s -> %s",
                self.state.value,
                transition.state.value,
            )
        self.state, self.data = transition.state, transition.data

        for action in transition.actions:
            if isinstance(action, SendToServer):
                await self._send(action)
            elif isinstance(action, Display):
                self._display(action.text)

    async def _send(self, action: SendToServer) -> None:
        try:
            await self.service.send(action.message, action.handle)
        except ConnectionError as e:
            logger.error("Failed to send %s: %s", action.message, e)
            self._display(f"Could not reach the server: {e}")

    async def run(self) -> None:
        """Process queued triggers until stop() is requested."""
        logger.info("Session started")
        while True:
            trigger = await self._queue.get()
            if trigger is _SHUTDOWN:
                break
            await self.process(trigger)
        logger.info("Session stopped")
