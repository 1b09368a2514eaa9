"""
Car order endpoints.

These routes expose CRUD operations on car orders.  They rely on the
``OrderService`` to check the requested car against the inventory
catalog and to keep the order collection consistent.  Unknown order
IDs answer HTTP 404; combinations missing from the catalog answer
HTTP 400.
"""

from typing import List

from fastapi import APIRouter, Depends, HTTPException, Response, status

from car_orders_api.app.core.dependencies import get_order_service
from car_orders_api.app.core.errors import InventoryError
from car_orders_api.app.schemas.order import OrderCreate, OrderRead, OrderUpdate
from car_orders_api.app.services.order_service import OrderService

router = APIRouter()


def _not_found(order_id: str) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_404_NOT_FOUND,
        detail=f"Car order with ID {order_id} not found",
    )


@router.get("", response_model=List[OrderRead], name="GetAllCarOrders")
async def list_orders(service: OrderService = Depends(get_order_service)) -> List[OrderRead]:
    """Return every order in the order it was placed."""
    return [OrderRead.from_order(order) for order in service.list_orders()]


@router.get("/{order_id}", response_model=OrderRead, name="GetCarOrderById")
async def get_order(order_id: str, service: OrderService = Depends(get_order_service)) -> OrderRead:
    order = service.get_order(order_id)
    if order is None:
        raise _not_found(order_id)
    return OrderRead.from_order(order)


@router.post(
    "",
    response_model=OrderRead,
    status_code=status.HTTP_201_CREATED,
    name="CreateCarOrder",
)
async def create_order(
    order_in: OrderCreate,
    response: Response,
    service: OrderService = Depends(get_order_service),
) -> OrderRead:
    """Place a new order.

    The order starts in status ``Pending``.  The ``Location`` header
    points at the new order.
    """
    try:
        order = service.create_order(order_in.make, order_in.model, order_in.color)
    except InventoryError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    response.headers["Location"] = f"/api/cars/{order.id}"
    return OrderRead.from_order(order)


@router.put("/{order_id}", response_model=OrderRead, name="UpdateCarOrder")
async def update_order(
    order_id: str,
    order_in: OrderUpdate,
    service: OrderService = Depends(get_order_service),
) -> OrderRead:
    """Update an existing order.

    Omitted fields keep their current value.  The resulting car is
    checked against the inventory again, even if only the status
    changes.
    """
    try:
        order = service.update_order(
            order_id,
            make=order_in.make,
            model=order_in.model,
            color=order_in.color,
            status=order_in.status,
        )
    except InventoryError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    if order is None:
        raise _not_found(order_id)
    return OrderRead.from_order(order)


@router.delete("/{order_id}", status_code=status.HTTP_204_NO_CONTENT, name="DeleteCarOrder")
async def delete_order(order_id: str, service: OrderService = Depends(get_order_service)) -> None:
    deleted = service.delete_order(order_id)
    if not deleted:
        raise _not_found(order_id)
    return None
