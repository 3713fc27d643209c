"""
Business logic for lessons.

The ``LessonService`` wraps the three lesson operations: bulk
creation, listing and partial update.  There is no business logic
beyond the store calls; store errors propagate to the API layer,
which turns them into HTTP 500 responses.
"""

import logging
from typing import Any, Dict, List

from bson import ObjectId

from lessons_api.app.core.db import LessonStore, serialize_document
from lessons_api.app.schemas.lesson import LessonCreate, LessonUpdate


class LessonService:
    """Service for creating, listing and updating lessons."""

    @classmethod
    async def create_lessons(cls, store: LessonStore, lessons: List[LessonCreate]) -> Dict[str, Any]:
        """Insert all lessons in one ``insert_many`` call.

        Returns a summary of the insertion result with the generated
        identifiers in request order.  An empty list inserts nothing;
        ``insert_many`` refuses empty batches, so it is not called.
        """
        logger = logging.getLogger(__name__)
        if not lessons:
            return {"acknowledged": True, "insertedCount": 0, "insertedIds": []}
        documents = [lesson.model_dump() for lesson in lessons]
        result = await store.lessons.insert_many(documents)
        logger.info("Inserted %s lessons", len(result.inserted_ids))
        return {
            "acknowledged": result.acknowledged,
            "insertedCount": len(result.inserted_ids),
            "insertedIds": [str(inserted_id) for inserted_id in result.inserted_ids],
        }

    @classmethod
    async def list_lessons(cls, store: LessonStore) -> List[Dict[str, Any]]:
        """Return every lesson document, unfiltered."""
        documents = await store.lessons.find({}).to_list(length=None)
        return serialize_document(documents)

    @classmethod
    async def update_lesson(cls, store: LessonStore, lesson_id: str, updates: LessonUpdate) -> Dict[str, Any]:
        """Set the given fields on the lesson identified by ``lesson_id``.

        The update is an unconditional ``$set``: the last writer wins.
        ``lesson_id`` is not validated beforehand, so a malformed value
        raises ``bson.errors.InvalidId``.
        """
        logger = logging.getLogger(__name__)
        fields = updates.model_dump(exclude_unset=True)
        object_id = ObjectId(lesson_id)
        if not fields:
            # MongoDB rejects an empty $set, so only count the match.
            matched = await store.lessons.count_documents({"_id": object_id})
            return {"acknowledged": True, "matchedCount": matched, "modifiedCount": 0}
        result = await store.lessons.update_one({"_id": object_id}, {"$set": fields})
        logger.info("Updated lesson %s fields %s", lesson_id, sorted(fields))
        return {
            "acknowledged": result.acknowledged,
            "matchedCount": result.matched_count,
            "modifiedCount": result.modified_count,
        }
