"""
Business logic for orders.

Placing an order checks the requested seat counts against the
remaining ``spaces`` stored on each lesson and then inserts the order
document.  The check and the insert are two separate store calls and
the lesson capacity is never decremented, so concurrent orders for the
same lesson are not coordinated.  In a production system the check
and a decrement should run as one conditional update per lesson.
"""

import logging
from datetime import datetime, timezone
from typing import Any, Dict, List

from bson import ObjectId

from lessons_api.app.core.db import LessonStore, serialize_document
from lessons_api.app.schemas.order import OrderCreate


class InsufficientSpacesError(ValueError):
    """Raised when an order requests more seats than a lesson has left."""

    def __init__(self, subject: str) -> None:
        super().__init__(f"Not enough spaces available for {subject}")
        self.subject = subject


def _remaining_spaces(lesson: Dict[str, Any]) -> int:
    """Read a lesson's seat count; text or missing values are tolerated.

    Older documents may hold the count as text.  A value that is not a
    number at all counts as no seats left.
    """
    try:
        return int(lesson.get("spaces") or 0)
    except (TypeError, ValueError):
        return 0


class OrderService:
    """Service for placing and listing orders."""

    @classmethod
    async def create_order(cls, store: LessonStore, order: OrderCreate) -> Dict[str, Any]:
        """Validate seat availability and store the order.

        Lessons listed in ``lessonIDs`` that do not exist are skipped.
        A lesson without an entry in ``spaces`` counts as zero seats
        requested.  Raises ``InsufficientSpacesError`` naming the first
        lesson whose remaining capacity is too small; nothing is
        written in that case.
        """
        logger = logging.getLogger(__name__)
        object_ids = [ObjectId(lesson_id) for lesson_id in order.lesson_ids]
        lessons = await store.lessons.find({"_id": {"$in": object_ids}}).to_list(length=None)

        for lesson in lessons:
            requested = order.spaces.get(str(lesson["_id"]), 0)
            available = _remaining_spaces(lesson)
            if requested > available:
                logger.info(
                    "Order by %s rejected: %s seats requested for lesson %s, %s left",
                    order.name,
                    requested,
                    lesson["_id"],
                    available,
                )
                raise InsufficientSpacesError(lesson.get("subject", str(lesson["_id"])))

        document = {
            "name": order.name,
            "phone": order.phone,
            "lessonIDs": list(order.lesson_ids),
            "spaces": dict(order.spaces),
            "createdAt": datetime.now(timezone.utc),
        }
        result = await store.orders.insert_one(document)
        document["_id"] = result.inserted_id
        logger.info("Order %s created for %s lessons", result.inserted_id, len(order.lesson_ids))
        return serialize_document(document)

    @classmethod
    async def list_orders(cls, store: LessonStore) -> List[Dict[str, Any]]:
        documents = await store.orders.find({}).to_list(length=None)
        return serialize_document(documents)
