"""Entry point for the Books API.

Starts the FastAPI application under uvicorn.  Host and port are read
from the ``HOST`` and ``PORT`` environment variables (see
``books_api.app.core.config``); the defaults are ``0.0.0.0`` and
``3000``.

Usage:
    python run.py
"""
import asyncio
import logging

from uvicorn import Config, Server

from books_api.app.core.config import settings
from books_api.app.main import app


async def main() -> None:
    """Serve the API until interrupted."""
    config = Config(
        app=app,
        host=settings.host,
        port=settings.port,
        reload=False,
        log_level=settings.log_level.lower(),
        # Handlers come from setup_logging, run by create_app.
        log_config=None,
    )
    server = Server(config)
    logging.getLogger(__name__).info("Server listening on port http://localhost:%s", settings.port)
    await server.serve()


if __name__ == "__main__":
    try:
        asyncio.run(main())
    except (KeyboardInterrupt, SystemExit):
        pass
