"""
Main entrypoint for the Lessons Marketplace API.

This module assembles the FastAPI application, sets up logging and
includes the routers.  The ``create_app`` function builds and
configures the app, which is then instantiated at module import time
as ``app``.  Importing the app here makes it easy to run with uvicorn
or another ASGI server, e.g.::

    uvicorn lessons_api.app.main:app --port 7000

The document store can be injected into ``create_app``; this is what
``run.py`` and the test suite do.  When nothing is injected the store
is connected in the startup hook instead.
"""

import logging
import sys
from typing import Optional

from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware

from .api.endpoints import images
from .api.router import router as api_router
from .core.config import Settings, settings
from .core.db import LessonStore, StoreConnectionError, connect_store
from .core.errors import validation_exception_handler
from .core.logging_config import log_requests, setup_logging


logger = logging.getLogger(__name__)


def create_app(store: Optional[LessonStore] = None, app_settings: Optional[Settings] = None) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    store : Optional[LessonStore]
        An already connected store.  If omitted, the startup hook
        connects using ``app_settings`` and exits the process on
        failure.
    app_settings : Optional[Settings]
        Settings to use instead of the module level ``settings``.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    app_settings = app_settings or settings
    # Initialise logging before anything else so that startup can log.
    setup_logging(app_settings.log_level, app_settings.log_file or None)

    app = FastAPI(title=app_settings.project_name, version=app_settings.api_version)
    app.state.settings = app_settings
    app.state.store = store

    app.add_middleware(
        CORSMiddleware,
        allow_origins=app_settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.middleware("http")(log_requests)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)

    app.include_router(api_router, prefix="/api")
    app.include_router(images.router, prefix="/images", tags=["images"])

    @app.on_event("startup")
    async def startup_event() -> None:
        if app.state.store is not None:
            return
        try:
            app.state.store = await connect_store(app_settings)
        except StoreConnectionError as e:
            logger.error("Error connecting to MongoDB: %s", e)
            sys.exit(1)

    @app.on_event("shutdown")
    async def shutdown_event() -> None:
        if app.state.store is not None:
            app.state.store.close()

    return app


# Create the application instance at import time so that tools such as
# uvicorn can discover it without calling create_app manually.
app = create_app()
