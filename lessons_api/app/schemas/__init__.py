"""
Pydantic schema definitions for API payloads.

Schemas describe request bodies only; stored documents are returned
as they are found in MongoDB.
"""
