"""
Client Configuration

Settings are read from the environment, falling back to defaults that
target a chat server on the local machine.

    CHAT_SERVER_URL        WebSocket URL of the server
    CHAT_CLIENT_UI         "tui" (Textual interface) or "plain" (stdin)
    CHAT_CLIENT_LOG_FILE   File that receives the client log
    CHAT_CLIENT_LOG_LEVEL  Logging level name, e.g. INFO
"""

import logging
import os
from dataclasses import dataclass
from typing import Mapping, Optional

DEFAULT_SERVER_URL = "ws://127.0.0.1:2551"
DEFAULT_LOG_FILE = "chat_client.log"
DEFAULT_LOG_LEVEL = "WARNING"

UI_MODES = ("tui", "plain")


@dataclass(frozen=True)
class ClientConfig:
    """Runtime settings of the chat client."""

    server_url: str = DEFAULT_SERVER_URL
    ui: str = "tui"
    log_file: str = DEFAULT_LOG_FILE
    log_level: int = logging.WARNING

    @classmethod
    def from_env(
        cls, environ: Optional[Mapping[str, str]] = None
    ) -> "ClientConfig":
        """
        Build the configuration from environment variables.

        Args:
            environ: Mapping to read instead of os.environ

        Raises:
            ValueError: If the UI mode or log level is not recognised
        """
        env = os.environ if environ is None else environ

        ui = env.get("CHAT_CLIENT_UI", "tui").lower()
        if ui not in UI_MODES:
            raise ValueError(
                f"CHAT_CLIENT_UI must be one of {', '.join(UI_MODES)}"
            )

        level_name = env.get("CHAT_CLIENT_LOG_LEVEL", DEFAULT_LOG_LEVEL)
        level = logging.getLevelName(level_name.upper())
        if not isinstance(level, int):
            raise ValueError(f"Unknown log level: {level_name}")

        return cls(
            server_url=env.get("CHAT_SERVER_URL", DEFAULT_SERVER_URL),
            ui=ui,
            log_file=env.get("CHAT_CLIENT_LOG_FILE", DEFAULT_LOG_FILE),
            log_level=level,
        )
