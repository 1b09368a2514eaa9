"""
Pydantic schemas for car orders.

``OrderCreate`` is the body of ``POST /api/cars``; all three fields are
required and must not be empty.  ``OrderUpdate`` is the body of
``PUT /api/cars/{id}``; every field is optional and omitted fields keep
their stored value.  ``OrderRead`` is the response shape.  Its field
names are serialized in camelCase (``orderDate``,
``expectedDeliveryDate``) to stay compatible with existing clients.
"""

from dataclasses import asdict
from datetime import datetime
from typing import Any, Optional

from pydantic import BaseModel, Field


class OrderCreate(BaseModel):
    """Schema for placing a new order."""

    make: str = Field(..., min_length=1, examples=["Toyota"])
    model: str = Field(..., min_length=1, examples=["Camry"])
    color: str = Field(..., min_length=1, examples=["Black"])


class OrderUpdate(BaseModel):
    """Schema for updating an order.

    All fields are optional; only provided fields will be updated.
    """

    make: Optional[str] = None
    model: Optional[str] = None
    color: Optional[str] = None
    status: Optional[str] = Field(None, examples=["Shipped"])


class OrderRead(BaseModel):
    """Schema for reading an order from the API."""

    id: str
    make: str
    model: str
    color: str
    order_date: datetime = Field(..., alias="orderDate")
    expected_delivery_date: datetime = Field(..., alias="expectedDeliveryDate")
    status: str

    model_config = {
        "from_attributes": True,
        "populate_by_name": True,
    }

    @classmethod
    def from_order(cls, order: Any) -> "OrderRead":
        """Build the response schema from a service-layer ``Order``."""
        return cls.model_validate(asdict(order))
