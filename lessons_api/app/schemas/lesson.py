"""
Pydantic models for lesson data.

Lessons are schema-less documents in MongoDB; these models only pin
down the fields the service itself relies on.  Additional keys (an
image name, an icon, a teacher) are accepted and stored untouched.
"""

from typing import Optional

from pydantic import BaseModel, Field


class LessonCreate(BaseModel):
    """Schema for one lesson in a bulk create request."""

    subject: str = Field(..., examples=["Math"])
    location: str = Field(..., examples=["London"])
    price: float = Field(..., examples=[100])
    spaces: int = Field(..., ge=0, examples=[5])

    model_config = {"extra": "allow"}


class LessonUpdate(BaseModel):
    """Schema for updating a lesson.

    All fields are optional; only the fields present in the request
    body are written, any other field of the document is left as is.
    """

    subject: Optional[str] = None
    location: Optional[str] = None
    price: Optional[float] = None
    spaces: Optional[int] = Field(default=None, ge=0)

    model_config = {"extra": "allow"}
