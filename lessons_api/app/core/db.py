"""
MongoDB integration.

This module provides the ``LessonStore`` adapter around an async
MongoDB client (motor), a ``connect_store`` coroutine used at
application start and a ``get_store`` dependency for FastAPI routes.
The store is created once and attached to ``app.state``; handlers
receive it through dependency injection rather than a module global.

Documents coming out of MongoDB contain ``ObjectId`` and ``datetime``
values which are not JSON serializable, so responses pass through
``serialize_document`` first.
"""

import logging
from datetime import datetime
from typing import Any

from bson import ObjectId
from bson.errors import BSONError
from fastapi import Request
from motor.motor_asyncio import AsyncIOMotorClient
from pymongo.errors import PyMongoError

from .config import Settings


logger = logging.getLogger(__name__)

# Exceptions raised by the driver or by BSON conversion (e.g. an
# invalid ObjectId string).  Handlers translate these into HTTP 500.
STORE_ERRORS = (PyMongoError, BSONError)


class StoreConnectionError(RuntimeError):
    """Raised when the document store cannot be reached at startup."""


class LessonStore:
    """Handle on the two collections used by the service."""

    def __init__(self, client: Any, database_name: str) -> None:
        self.client = client
        self.db = client[database_name]
        self.lessons = self.db["lessons"]
        self.orders = self.db["orders"]

    def close(self) -> None:
        self.client.close()


async def connect_store(settings: Settings) -> LessonStore:
    """Connect to MongoDB and verify the server answers a ``ping``.

    There is no retry: callers are expected to log the error and
    terminate the process.
    """
    if not settings.mongo_url:
        raise StoreConnectionError("MONGO_URL is not set")
    client = AsyncIOMotorClient(settings.mongo_url)
    try:
        await client.admin.command("ping")
    except PyMongoError as exc:
        client.close()
        raise StoreConnectionError(str(exc)) from exc
    logger.info("MongoDB connected.")
    return LessonStore(client, settings.mongo_db)


def get_store(request: Request) -> LessonStore:
    """FastAPI dependency returning the store attached to the application."""
    return request.app.state.store


def serialize_document(value: Any) -> Any:
    """Recursively convert BSON values into JSON friendly ones."""
    if isinstance(value, ObjectId):
        return str(value)
    if isinstance(value, datetime):
        return value.isoformat()
    if isinstance(value, dict):
        return {key: serialize_document(item) for key, item in value.items()}
    if isinstance(value, (list, tuple)):
        return [serialize_document(item) for item in value]
    return value
