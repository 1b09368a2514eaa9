"""Shared fixtures for the Car Ordering API tests."""

from datetime import datetime, timezone

import pytest
from fastapi.testclient import TestClient

from car_orders_api.app.core.config import Settings
from car_orders_api.app.main import create_app
from car_orders_api.app.services.catalog_service import InventoryCatalog
from car_orders_api.app.services.order_service import OrderService


FIXED_NOW = datetime(2026, 1, 15, 12, 0, tzinfo=timezone.utc)
FIXED_OFFSET = 10


@pytest.fixture
def catalog():
    """A small catalog: Toyota (Camry, Corolla), BMW (X3); Black and Red."""
    return InventoryCatalog(
        models={"Toyota": ["Camry", "Corolla"], "BMW": ["X3"]},
        colors=["Black", "Red"],
    )


@pytest.fixture
def service(catalog):
    """Order service with a pinned clock and delivery offset."""
    return OrderService(
        catalog,
        clock=lambda: FIXED_NOW,
        delivery_offset=lambda: FIXED_OFFSET,
    )


@pytest.fixture
def settings():
    return Settings(banner="Test car ordering API")


@pytest.fixture
def client(settings, service):
    """A test client bound to a fresh application and service."""
    app = create_app(settings, service)
    with TestClient(app) as c:
        yield c


@pytest.fixture
def camry(client):
    """A created Toyota Camry order, as returned by the API."""
    resp = client.post("/api/cars", json={"make": "Toyota", "model": "Camry", "color": "Black"})
    assert resp.status_code == 201
    return resp.json()
