"""
Order endpoints.

``POST /orders`` relies on ``OrderService`` for the capacity check.
A lesson without enough remaining spaces yields HTTP 400 naming the
lesson; store failures yield HTTP 500.
"""

import logging
from typing import Any, Dict

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse

from lessons_api.app.core.db import STORE_ERRORS, LessonStore, get_store
from lessons_api.app.schemas.order import OrderCreate
from lessons_api.app.services.order_service import InsufficientSpacesError, OrderService


logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("", status_code=status.HTTP_201_CREATED, response_model=Dict[str, Any])
async def create_order(order: OrderCreate, store: LessonStore = Depends(get_store)):
    """Place an order for seats in one or more lessons."""
    try:
        created = await OrderService.create_order(store, order)
    except InsufficientSpacesError as e:
        return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content={"error": str(e)})
    except STORE_ERRORS as e:
        logger.error("Failed to create order: %s", e)
        return JSONResponse(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, content={"error": str(e)})
    return {"message": "Order created successfully", "order": created}


@router.get("", response_model=Dict[str, Any])
async def list_orders(store: LessonStore = Depends(get_store)):
    try:
        results = await OrderService.list_orders(store)
    except STORE_ERRORS as e:
        logger.error("Failed to fetch orders: %s", e)
        return JSONResponse(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, content={"error": str(e)})
    return {"message": "Orders fetched successfully", "results": results}
