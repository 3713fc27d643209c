"""
Text search over lessons.

One case-insensitive ``$regex`` built from the user's query is matched
against ``subject``, ``location``, ``price`` and ``spaces``.  The query
is used as a pattern, not escaped.  MongoDB only applies ``$regex`` to
string values, so numeric prices and space counts match only where
they happen to be stored as text.
"""

from typing import Any, Dict, List

from lessons_api.app.core.db import LessonStore, serialize_document


SEARCH_FIELDS = ("subject", "location", "price", "spaces")


def build_search_filter(query: str) -> Dict[str, Any]:
    pattern = {"$regex": query, "$options": "i"}
    return {"$or": [{field: pattern} for field in SEARCH_FIELDS]}


class SearchService:
    """Service for searching lessons."""

    @classmethod
    async def search_lessons(cls, store: LessonStore, query: str) -> List[Dict[str, Any]]:
        documents = await store.lessons.find(build_search_filter(query)).to_list(length=None)
        return serialize_document(documents)
