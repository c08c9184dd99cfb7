"""
Top-level API router.

Aggregates the per-resource routers under their path prefixes.
"""

from fastapi import APIRouter

from grubdash.api import dishes, orders

router = APIRouter()

router.include_router(dishes.router, prefix="/dishes", tags=["Dishes"])
router.include_router(orders.router, prefix="/orders", tags=["Orders"])

__all__ = ["router"]
