"""
Application entry point.
"""

import sys
import asyncio

from startup_namer.core.config import settings
from startup_namer.core.logging import setup_logging, get_logger
from startup_namer.web.server import create_app, start_web_server

logger = get_logger(__name__)


async def main() -> None:
    """Main application entry point."""
    setup_logging(settings.log_level)
    logger.info("Starting startup namer...")

    app = create_app(settings)
    runner = await start_web_server(app, settings.web_host, settings.web_port)

    # Keep running until cancelled
    stop_signal = asyncio.Event()
    try:
        await stop_signal.wait()
    except asyncio.CancelledError:
        pass
    finally:
        await runner.cleanup()


def run() -> None:
    """Console entry point."""
    if sys.platform == "win32":
        asyncio.set_event_loop_policy(asyncio.WindowsSelectorEventLoopPolicy())

    try:
        asyncio.run(main())
    except KeyboardInterrupt:
        pass
