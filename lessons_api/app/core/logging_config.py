"""
Basic logging configuration for the application.

``setup_logging`` sets the level of the service loggers and, when
nothing else has configured logging yet, attaches console and file
handlers to the root logger.  ``log_requests`` is an HTTP middleware
that writes one line per handled request to ``lessons_api.requests``.
"""

import logging
import time
from pathlib import Path
from typing import Awaitable, Callable, List, Optional

from fastapi import Request
from starlette.responses import Response


LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

request_logger = logging.getLogger("lessons_api.requests")


def _build_handlers(logfile: Optional[str]) -> List[logging.Handler]:
    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)
    handlers: List[logging.Handler] = [logging.StreamHandler()]
    if logfile:
        handlers.append(logging.FileHandler(Path(logfile).resolve(), encoding="utf-8"))
    for handler in handlers:
        handler.setFormatter(formatter)
    return handlers


def setup_logging(level: str = "INFO", logfile: Optional[str] = None) -> None:
    """Configure logging for the service.

    The ``lessons_api`` logger tree gets the requested ``level``.
    Uvicorn's access log is switched off because ``log_requests``
    already writes one line per request.  Console (and optional file)
    handlers are attached to the root logger only when it has none, so
    repeated ``create_app`` calls and pytest's own handlers are left
    alone.

    Parameters
    ----------
    level : str
        Logging level name (e.g. ``"DEBUG"``, ``"INFO"``).  Case
        insensitive; unknown names fall back to ``INFO``.
    logfile : Optional[str]
        Path of an extra log file, resolved against the current
        working directory.
    """
    numeric_level = logging.getLevelName(level.upper())
    if not isinstance(numeric_level, int):
        numeric_level = logging.INFO
    logging.getLogger("lessons_api").setLevel(numeric_level)
    logging.getLogger("uvicorn.access").disabled = True

    root = logging.getLogger()
    if root.handlers:
        return
    root.setLevel(numeric_level)
    for handler in _build_handlers(logfile):
        root.addHandler(handler)


async def log_requests(
    request: Request, call_next: Callable[[Request], Awaitable[Response]]
) -> Response:
    """Log method, path, status code and duration of every request."""
    started = time.perf_counter()
    response = await call_next(request)
    elapsed_ms = (time.perf_counter() - started) * 1000
    request_logger.info(
        "%s %s -> %s (%.1f ms)",
        request.method,
        request.url.path,
        response.status_code,
        elapsed_ms,
    )
    return response
