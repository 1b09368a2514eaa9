"""
Top-level API router.

Aggregates the car order and catalog routers under ``/api/cars``.  The
catalog router is included first: its fixed paths (``/makes``,
``/colors``) would otherwise be captured by ``/{order_id}``.
"""

from fastapi import APIRouter

from .endpoints import cars, catalog

router = APIRouter()

router.include_router(catalog.router, prefix="/api/cars", tags=["Cars"])
router.include_router(cars.router, prefix="/api/cars", tags=["Cars"])
