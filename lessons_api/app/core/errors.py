"""
Error responses shared by all routes.

FastAPI answers request validation failures with HTTP 422 and a
``detail`` list.  Clients of this service expect HTTP 400 with an
``error`` message, so ``validation_exception_handler`` reshapes the
failure into ``{"error": ..., "errors": [...]}`` where every item names
the offending field.
"""

from typing import Any, Dict, List

from fastapi import Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse


def format_validation_errors(errors: List[Dict[str, Any]]) -> List[str]:
    """Turn pydantic error dicts into ``"field: message"`` strings."""
    items: List[str] = []
    for err in errors:
        # Drop the leading "body"/"query"/"path" marker from the location.
        loc = [str(part) for part in err.get("loc", ())][1:]
        field = ".".join(loc) or "body"
        items.append(f"{field}: {err.get('msg', 'invalid value')}")
    return items


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={
            "error": "Invalid request",
            "errors": format_validation_errors(exc.errors()),
        },
    )
