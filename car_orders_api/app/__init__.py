"""
The car ordering FastAPI application.

``core`` holds settings, logging, errors and service wiring;
``services`` the catalog and order rules; ``schemas`` the pydantic
bodies; ``api`` the routes.
"""

from .main import app, create_app  # noqa: F401
