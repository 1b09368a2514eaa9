"""
Construction and injection of the order service.

The application holds exactly one ``OrderService`` on ``app.state``.
``build_order_service`` creates it from ``Settings``; route handlers
receive it through the ``get_order_service`` dependency, which lets
tests hand a pre-built service to ``create_app``.
"""

from fastapi import Request

from car_orders_api.app.core.config import Settings
from car_orders_api.app.services.catalog_service import InventoryCatalog
from car_orders_api.app.services.order_service import OrderService


def build_order_service(settings: Settings) -> OrderService:
    """Create an ``OrderService`` configured from ``settings``."""
    if settings.catalog_file:
        catalog = InventoryCatalog.from_file(settings.catalog_file)
    else:
        catalog = InventoryCatalog()
    return OrderService(
        catalog,
        inventory_check=settings.inventory_check,
        delivery_lead_months=settings.delivery_lead_months,
        delivery_jitter_days=settings.delivery_jitter_days,
    )


def get_order_service(request: Request) -> OrderService:
    """FastAPI dependency returning the application's order service."""
    return request.app.state.order_service
