"""Entry point for the Lessons Marketplace API.

This script connects to MongoDB, builds the FastAPI application with
the connected store and serves it with Uvicorn.  If the store cannot
be reached the error is logged and the process exits with status 1;
there is no retry.

Configuration is read from environment variables, see
``lessons_api/app/core/config.py``.  ``MONGO_URL`` is required and
``PORT`` defaults to 7000.

Usage:
    MONGO_URL=mongodb://localhost:27017 python run.py
"""
import asyncio
import logging
import sys

from uvicorn import Config, Server

from lessons_api.app.core.config import settings
from lessons_api.app.core.db import StoreConnectionError, connect_store
from lessons_api.app.core.logging_config import setup_logging
from lessons_api.app.main import create_app


logger = logging.getLogger("lessons_api")


async def main() -> None:
    """Connect the store, then serve the API until interrupted."""
    setup_logging(settings.log_level, settings.log_file or None)
    try:
        store = await connect_store(settings)
    except StoreConnectionError as e:
        logger.error("Error connecting to MongoDB: %s", e)
        sys.exit(1)

    app = create_app(store=store, app_settings=settings)
    config = Config(app=app, host=settings.host, port=settings.port, reload=False, log_level="info")
    server = Server(config)
    logger.info("Server running on port: %s", settings.port)
    await server.serve()


if __name__ == "__main__":
    try:
        asyncio.run(main())
    except KeyboardInterrupt:
        pass
