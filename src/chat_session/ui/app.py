"""
Chat Application UI

Terminal front end for the chat session, built using the Textual
framework. Lines typed in the input box are handed to the session as
terminal input; every line the session displays is appended to the log.
"""

import asyncio
import logging
from typing import List, Optional

from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.widgets import Footer, Header, Input, Log

from ..config import ClientConfig
from ..service import ClientService
from ..session import STOP_SENTINEL, ChatSession

logger = logging.getLogger(__name__)


class ChatApp(App):
    """Main chat application."""

    TITLE = "Chat Client"

    CSS = """
    Screen {
        layout: vertical;
    }

    #chat-log {
        height: 1fr;
        border: solid $accent;
    }

    #line-input {
        dock: bottom;
    }
    """

    BINDINGS = [
        Binding("ctrl+q", "quit", "Quit", show=True),
    ]

    def __init__(self, config: Optional[ClientConfig] = None) -> None:
        """Initialize the chat application."""
        super().__init__()
        self.config = config or ClientConfig()
        self.session: Optional[ChatSession] = None
        self._service: Optional[ClientService] = None
        self._tasks: List[asyncio.Task] = []

    def compose(self) -> ComposeResult:
        """Compose the main application layout."""
        yield Header()
        yield Log(id="chat-log")
        yield Input(
            placeholder=f"Nickname, message or \\command ({STOP_SENTINEL} quits)",
            id="line-input",
        )
        yield Footer()

    async def on_mount(self) -> None:
        """Connect to the server and start the session."""
        self.query_one("#line-input", Input).focus()

        service = ClientService(self.config.server_url)
        try:
            await service.connect()
        except ConnectionError as e:
            self.write_line(f"Connection failed: {e}")
            return

        self._service = service
        self.session = ChatSession(service, display=self.write_line)
        self.write_line(
            f"Connected to {self.config.server_url}. Enter a nickname."
        )
        self._tasks = [
            asyncio.create_task(self.session.pump_events()),
            asyncio.create_task(self._run_session()),
        ]

    async def _run_session(self) -> None:
        try:
            await self.session.run()
        except Exception as e:
            logger.error("Session runner failed: %s", e)
        self.exit()

    async def on_input_submitted(self, event: Input.Submitted) -> None:
        """Handle input submit events (Enter key)."""
        line = event.value
        event.input.value = ""
        if self.session:
            self.session.submit_line(line)
        elif line.strip() == STOP_SENTINEL:
            self.exit()

    def write_line(self, text: str) -> None:
        """Append one line to the chat log."""
        self.query_one("#chat-log", Log).write_line(text)

    async def on_unmount(self) -> None:
        """Stop background tasks and close the connection."""
        for task in self._tasks:
            task.cancel()
        for task in self._tasks:
            try:
                await task
            except asyncio.CancelledError:
                pass
        self._tasks = []

        if self._service:
            await self._service.disconnect()
            self._service = None
