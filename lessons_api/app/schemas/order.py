"""
Pydantic models for orders.

The JSON keys ``lessonIDs`` and ``createdAt`` are kept for
compatibility with existing clients; the Python attributes use
snake_case and map to them through aliases.
"""

from typing import Annotated, Dict, List

from pydantic import BaseModel, Field


class OrderCreate(BaseModel):
    """Schema for placing an order.

    All four fields are required.  ``spaces`` maps a lesson identifier
    to the number of seats requested for that lesson.  Unknown fields
    are rejected.
    """

    name: str = Field(..., min_length=1, examples=["Jane Doe"])
    phone: str = Field(..., min_length=1, examples=["07123456789"])
    lesson_ids: List[str] = Field(..., alias="lessonIDs")
    spaces: Dict[str, Annotated[int, Field(ge=0)]] = Field(..., examples=[{"6571f0c2a1b2c3d4e5f60718": 2}])

    model_config = {
        "extra": "forbid",
        "populate_by_name": True,
    }
