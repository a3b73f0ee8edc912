#!/usr/bin/env python3
"""
Chat Client Application

Client application for connecting to a chat server. Runs the Textual
terminal interface by default, or a plain line-based loop on stdin when
CHAT_CLIENT_UI=plain. In the plain loop a line reading STOP ends the
session.
"""

import asyncio
import logging
import sys
import threading

from .config import ClientConfig
from .service import ClientService
from .session import ChatSession

logger = logging.getLogger(__name__)


def configure_logging(config: ClientConfig) -> None:
    """Send the log to a file so it does not interfere with the UI."""
    logging.basicConfig(
        level=config.log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=[logging.FileHandler(config.log_file, mode="a")],
    )


def _read_stdin(loop: asyncio.AbstractEventLoop, session: ChatSession) -> None:
    for line in sys.stdin:
        if loop.is_closed():
            return
        loop.call_soon_threadsafe(session.submit_line, line.rstrip("\n"))
    if not loop.is_closed():
        loop.call_soon_threadsafe(session.stop)


async def run_plain(config: ClientConfig) -> None:
    """
    Run the session against stdin and stdout.

    Terminal lines are read on a daemon thread and handed to the event
    loop, so they join server events in the same ordered queue.
    """
    service = ClientService(config.server_url)
    await service.connect()

    session = ChatSession(service, display=print)
    pump_task = asyncio.create_task(session.pump_events())
    reader = threading.Thread(
        target=_read_stdin,
        args=(asyncio.get_running_loop(), session),
        daemon=True,
    )
    reader.start()

    try:
        await session.run()
    finally:
        pump_task.cancel()
        try:
            await pump_task
        except asyncio.CancelledError:
            pass
        except Exception as e:
            logger.error("Server event pump failed: %s", e)
        await service.disconnect()


def main():
    """Main entry point for the chat client."""
    try:
        config = ClientConfig.from_env()
    except ValueError as e:
        print(f"Error: {e}")
        sys.exit(1)

    configure_logging(config)
    logger.info("Starting chat client for %s...", config.server_url)

    if config.ui == "plain":
        try:
            asyncio.run(run_plain(config))
        except ConnectionError as e:
            print(f"Error: {e}")
            sys.exit(1)
        except KeyboardInterrupt:
            print("\nExiting...")
            sys.exit(0)
        print("Done!")
        return

    try:
        from .ui import ChatApp

        app = ChatApp(config)
        app.run()
    except ImportError as e:
        print(f"Error: Could not import UI components: {e}")
        print("Make sure textual is installed: pip install textual")
        sys.exit(1)
    except KeyboardInterrupt:
        print("\nExiting...")
        sys.exit(0)


if __name__ == "__main__":
    main()
