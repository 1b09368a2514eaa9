"""
FastAPI application factory for the car ordering service.

``create_app`` wires one ``OrderService`` (built from ``Settings`` unless
a test hands one in) into a FastAPI instance.  It also adds the
plain-text banner on ``/``, turns request validation failures into
HTTP 400 and mounts the ``/api/cars`` routers.  The module-level
``app`` is what ASGI servers load::

    uvicorn car_orders_api.app.main:app
"""

import logging
from typing import Optional

from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse, PlainTextResponse

from .api.router import router as api_router
from .core.config import Settings, settings as default_settings
from .core.dependencies import build_order_service
from .core.logging_config import setup_logging
from .services.order_service import OrderService


def create_app(
    settings: Optional[Settings] = None,
    service: Optional[OrderService] = None,
) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    settings : Optional[Settings]
        Configuration to use; defaults to the environment-derived
        ``settings`` singleton.
    service : Optional[OrderService]
        Pre-built order service.  When omitted, one is built from
        ``settings``.  Each application owns its service, so separate
        apps never share orders.

    Returns
    -------
    FastAPI
        A configured FastAPI instance ready to be served.
    """
    settings = settings or default_settings
    # build_order_service logs, so handlers must exist first.
    setup_logging(settings)
    logger = logging.getLogger(__name__)

    app = FastAPI(title=settings.project_name, version=settings.api_version, debug=settings.debug)
    app.state.settings = settings
    app.state.order_service = service or build_order_service(settings)

    @app.get("/", response_class=PlainTextResponse, include_in_schema=False)
    async def root() -> str:
        return settings.banner

    # Missing or empty required fields are a client error; answer 400
    # instead of FastAPI's default 422.
    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
        logger.info("Rejected request to %s: %s", request.url.path, exc.errors())
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"detail": jsonable_encoder(exc.errors())},
        )

    app.include_router(api_router)

    logger.info(
        "%s %s ready (inventory check %s, %d makes)",
        settings.project_name,
        settings.api_version,
        "on" if app.state.order_service.inventory_check else "off",
        len(app.state.order_service.catalog.makes()),
    )
    return app


# Environment-configured instance served by run.py and uvicorn.
app = create_app()
