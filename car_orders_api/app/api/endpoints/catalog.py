"""
Inventory lookup endpoints.

Read-only lists of the makes, models and colors that can be ordered.
Clients use them to build selection menus before placing an order.
"""

from typing import List

from fastapi import APIRouter, Depends, HTTPException, status

from car_orders_api.app.core.dependencies import get_order_service
from car_orders_api.app.services.order_service import OrderService

router = APIRouter()


@router.get("/makes", response_model=List[str], name="GetAvailableMakes")
async def list_makes(service: OrderService = Depends(get_order_service)) -> List[str]:
    return service.catalog.makes()


@router.get("/models/{make}", response_model=List[str], name="GetModelsForMake")
async def list_models(make: str, service: OrderService = Depends(get_order_service)) -> List[str]:
    """Return the models offered for ``make`` (case insensitive)."""
    models = service.catalog.models_for(make)
    if models is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"No models found for make '{make}'",
        )
    return models


@router.get("/colors", response_model=List[str], name="GetAvailableColors")
async def list_colors(service: OrderService = Depends(get_order_service)) -> List[str]:
    return service.catalog.colors()
