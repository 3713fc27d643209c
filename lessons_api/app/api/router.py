"""
Top‑level API router.

This router aggregates the domain routers under the ``/api`` prefix
applied in ``main.create_app``.  The image router is mounted
separately because it lives outside ``/api``.
"""

from fastapi import APIRouter

from .endpoints import lessons, orders, search

router = APIRouter()

router.include_router(lessons.router, prefix="/lessons", tags=["lessons"])
router.include_router(orders.router, prefix="/orders", tags=["orders"])
router.include_router(search.router, prefix="/search", tags=["search"])
