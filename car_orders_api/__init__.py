"""
Car ordering service.

An HTTP API for placing, changing and cancelling car orders against a
fixed inventory of makes, models and colors.  The FastAPI application
lives in :mod:`car_orders_api.app`.
"""

__all__ = []
