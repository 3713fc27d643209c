"""
Search endpoint.

Unlike the other list endpoints, the matches are returned as a bare
JSON array without a ``{message, results}`` envelope, which is what
existing clients of the search route consume.  Errors use a
``message`` key.
"""

import logging
from typing import Any, Dict, List, Optional

from fastapi import APIRouter, Depends, Query, status
from fastapi.responses import JSONResponse

from lessons_api.app.core.db import STORE_ERRORS, LessonStore, get_store
from lessons_api.app.services.search_service import SearchService


logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("", response_model=List[Dict[str, Any]])
async def search_lessons(
    query: Optional[str] = Query(None, description="Case-insensitive text to look for"),
    store: LessonStore = Depends(get_store),
):
    """Search lessons by subject, location, price or spaces."""
    if not query:
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"message": "Query parameter is required"},
        )
    try:
        return await SearchService.search_lessons(store, query)
    except STORE_ERRORS as e:
        logger.error("Search for %r failed: %s", query, e)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"message": str(e)},
        )
