"""
Service layer for car orders.

``OrderService`` owns the in-memory collection of orders and enforces
the inventory check at the two points where an order is written:
creation and update.  Orders are immutable values; an update builds a
new ``Order`` from the stored one and swaps it into the same position,
so a rejected update never leaves a half-modified order behind.

The clock and the random delivery offset are injectable so tests can
pin both.  All access to the collection is serialized by a lock.
"""

from __future__ import annotations

import calendar
import logging
import random
import threading
import uuid
from dataclasses import dataclass, replace
from datetime import datetime, timedelta, timezone
from typing import Callable, List, Optional

from car_orders_api.app.core.errors import InventoryError
from car_orders_api.app.services.catalog_service import InventoryCatalog


logger = logging.getLogger(__name__)

DEFAULT_STATUS = "Pending"


@dataclass(frozen=True)
class Order:
    """A single customer order."""

    id: str
    make: str
    model: str
    color: str
    order_date: datetime
    expected_delivery_date: datetime
    status: str = DEFAULT_STATUS


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def add_months(moment: datetime, months: int) -> datetime:
    """Shift ``moment`` by whole calendar months.

    The day is clamped to the length of the target month, so
    31 August plus six months is 28 (or 29) February.
    """
    month_index = moment.month - 1 + months
    year = moment.year + month_index // 12
    month = month_index % 12 + 1
    day = min(moment.day, calendar.monthrange(year, month)[1])
    return moment.replace(year=year, month=month, day=day)


def _normalize_id(order_id: str) -> Optional[str]:
    # Identifiers are UUIDs; anything that doesn't parse can't be a known order.
    try:
        return str(uuid.UUID(str(order_id)))
    except ValueError:
        return None


class OrderService:
    """In-memory store and lifecycle rules for car orders."""

    def __init__(
        self,
        catalog: Optional[InventoryCatalog] = None,
        *,
        inventory_check: bool = True,
        clock: Callable[[], datetime] = utc_now,
        delivery_offset: Optional[Callable[[], int]] = None,
        delivery_lead_months: int = 6,
        delivery_jitter_days: int = 100,
    ) -> None:
        if delivery_jitter_days < 0:
            raise ValueError(f"Delivery jitter must not be negative, got {delivery_jitter_days} days")
        # A month is at least 28 days, so the earliest possible delivery
        # never falls before the order date.
        if delivery_lead_months < 0 or delivery_lead_months * 28 < delivery_jitter_days:
            raise ValueError(
                f"Delivery lead of {delivery_lead_months} months is too short "
                f"for a jitter of {delivery_jitter_days} days"
            )
        self.catalog = catalog or InventoryCatalog()
        self.inventory_check = inventory_check
        self.delivery_lead_months = delivery_lead_months
        self.delivery_jitter_days = delivery_jitter_days
        self._clock = clock
        self._delivery_offset = delivery_offset or self._random_offset
        self._orders: List[Order] = []
        self._lock = threading.Lock()

    def _random_offset(self) -> int:
        return random.randint(-self.delivery_jitter_days, self.delivery_jitter_days)

    def _check_inventory(self, make: str, model: str, color: str) -> None:
        if self.inventory_check and not self.catalog.is_available(make, model, color):
            logger.warning("Rejected unavailable car %s %s %s", make, model, color)
            raise InventoryError(make, model, color)

    def _index_of(self, order_id: str) -> Optional[int]:
        key = _normalize_id(order_id)
        if key is None:
            return None
        for index, order in enumerate(self._orders):
            if order.id == key:
                return index
        return None

    def create_order(self, make: str, model: str, color: str) -> Order:
        """Place a new order and return it.

        Raises ``InventoryError`` if the combination is not in the
        catalog; nothing is stored in that case.  The expected delivery
        date is the order date plus the lead time, shifted by a random
        number of days within the configured jitter.
        """
        self._check_inventory(make, model, color)
        now = self._clock()
        expected = add_months(now, self.delivery_lead_months) + timedelta(days=self._delivery_offset())
        order = Order(
            id=str(uuid.uuid4()),
            make=make,
            model=model,
            color=color,
            order_date=now,
            expected_delivery_date=expected,
            status=DEFAULT_STATUS,
        )
        with self._lock:
            self._orders.append(order)
        logger.info("Created car order %s (%s %s %s)", order.id, make, model, color)
        return order

    def get_order(self, order_id: str) -> Optional[Order]:
        """Return the order with ``order_id`` or ``None`` if there is none."""
        with self._lock:
            index = self._index_of(order_id)
            return self._orders[index] if index is not None else None

    def list_orders(self) -> List[Order]:
        """Return all orders in the order they were placed."""
        with self._lock:
            return list(self._orders)

    def update_order(
        self,
        order_id: str,
        *,
        make: Optional[str] = None,
        model: Optional[str] = None,
        color: Optional[str] = None,
        status: Optional[str] = None,
    ) -> Optional[Order]:
        """Update an existing order.

        Only the fields that are given replace the stored values.  The
        resulting make/model/color is checked against the catalog even
        if none of them changed.  Returns the updated order, ``None`` if
        the order does not exist, or raises ``InventoryError``.
        """
        with self._lock:
            index = self._index_of(order_id)
            if index is None:
                return None
            current = self._orders[index]
            updated = replace(
                current,
                make=make if make is not None else current.make,
                model=model if model is not None else current.model,
                color=color if color is not None else current.color,
                status=status if status is not None else current.status,
            )
            self._check_inventory(updated.make, updated.model, updated.color)
            self._orders[index] = updated
        logger.info("Updated car order %s", updated.id)
        return updated

    def delete_order(self, order_id: str) -> bool:
        """Delete an order.  Returns ``True`` if it existed."""
        with self._lock:
            index = self._index_of(order_id)
            if index is None:
                return False
            removed = self._orders.pop(index)
        logger.info("Deleted car order %s", removed.id)
        return True
