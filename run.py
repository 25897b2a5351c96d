"""Entry point for running the Invitation API under uvicorn.

Host and port come from the ``HOST`` and ``PORT`` environment
variables (or a ``.env`` file); the defaults are ``0.0.0.0`` and
``8080``.

Usage:
    python run.py
"""
import asyncio
import logging

from uvicorn import Config, Server

from invitation_api.app.core.config import settings
from invitation_api.app.core.logging_config import setup_logging


async def main() -> None:
    """Serve the API until interrupted."""
    setup_logging(settings.log_level, settings.log_file, settings.log_level_overrides)
    config = Config(
        app="invitation_api.app.main:app",
        host=settings.host,
        port=settings.port,
        reload=False,
        log_level=settings.log_level.lower(),
    )
    server = Server(config)
    logging.getLogger(__name__).info("Server is running on port %s", settings.port)
    await server.serve()


if __name__ == "__main__":
    try:
        asyncio.run(main())
    except (KeyboardInterrupt, SystemExit):
        pass
