"""Entry point for the Car Ordering API.

Serves the FastAPI application with uvicorn.  Host and port come from
``HOST`` and ``PORT`` (defaults ``0.0.0.0`` and ``8000``); all other
configuration is read by ``car_orders_api.app.core.config``.

Usage:
    python run.py
"""
import asyncio

from uvicorn import Config, Server

from car_orders_api.app.core.config import settings
from car_orders_api.app.main import app


async def run_api() -> None:
    """Start the API server using Uvicorn."""
    config = Config(app=app, host=settings.host, port=settings.port, reload=False, log_level=settings.log_level.lower())
    server = Server(config)
    await server.serve()


if __name__ == "__main__":
    try:
        asyncio.run(run_api())
    except (KeyboardInterrupt, SystemExit):
        pass
