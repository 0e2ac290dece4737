"""Entry point for the message board API.

Starts the FastAPI application under Uvicorn.  Host and port come from
the ``HOST`` and ``PORT`` environment variables (see
``christmas_tree_api.app.core.config``).

Usage:
    python run.py
"""
import asyncio
import logging

from uvicorn import Config, Server

from christmas_tree_api.app.core.config import settings
from christmas_tree_api.app.main import app


async def run_api() -> None:
    """Serve the API until interrupted."""
    config = Config(app=app, host=settings.host, port=settings.port, reload=False, log_level=settings.log_level.lower())
    server = Server(config)
    await server.serve()


if __name__ == "__main__":
    try:
        asyncio.run(run_api())
    except (KeyboardInterrupt, SystemExit):
        logging.getLogger(__name__).info("Shutting down")
