"""
Lesson endpoints.

These routes create lessons in bulk, list them and apply partial
updates.  Any failure reported by the document store is returned as
HTTP 500 with the raw error message in the ``error`` field.
"""

import logging
from typing import Any, Dict, List

from fastapi import APIRouter, Body, Depends, Path, status
from fastapi.responses import JSONResponse

from lessons_api.app.core.db import STORE_ERRORS, LessonStore, get_store
from lessons_api.app.schemas.lesson import LessonCreate, LessonUpdate
from lessons_api.app.services.lesson_service import LessonService


logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("", status_code=status.HTTP_201_CREATED, response_model=Dict[str, Any])
async def create_lessons(
    lessons: List[LessonCreate] = Body(...),
    store: LessonStore = Depends(get_store),
):
    """Create lessons from an array in the request body."""
    try:
        result = await LessonService.create_lessons(store, lessons)
    except STORE_ERRORS as e:
        logger.error("Failed to create lessons: %s", e)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"error": str(e), "success": False},
        )
    return {"message": "Lessons created successfully", "result": result}


@router.get("", response_model=Dict[str, Any])
async def list_lessons(store: LessonStore = Depends(get_store)):
    """Return all lessons."""
    try:
        results = await LessonService.list_lessons(store)
    except STORE_ERRORS as e:
        logger.error("Failed to fetch lessons: %s", e)
        return JSONResponse(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, content={"error": str(e)})
    return {"message": "Lessons fetched successfully", "results": results}


@router.put("/{lesson_id}", response_model=Dict[str, Any])
async def update_lesson(
    updates: LessonUpdate,
    lesson_id: str = Path(..., description="Identifier of the lesson"),
    store: LessonStore = Depends(get_store),
):
    """Update the given fields of a lesson.

    Fields that are not part of the body keep their current value.  A
    malformed identifier is reported by the store layer as HTTP 500.
    """
    try:
        result = await LessonService.update_lesson(store, lesson_id, updates)
    except STORE_ERRORS as e:
        logger.error("Failed to update lesson %s: %s", lesson_id, e)
        return JSONResponse(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, content={"error": str(e)})
    return {"message": "Lesson updated successfully", "result": result}
