"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from
environment variables.  Defaults are provided for all fields, so the
service starts with the built-in inventory catalog and the inventory
check enabled when nothing is configured.
"""

import os
from dataclasses import dataclass


def _env_flag(name: str, default: str) -> bool:
    return os.getenv(name, default).lower() in {"1", "true", "yes"}


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = os.getenv("PROJECT_NAME", "Car Ordering API")
    api_version: str = os.getenv("API_VERSION", "1.0.0")
    debug: bool = _env_flag("DEBUG", "false")
    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    # Optional path to a log file in addition to the console handler.
    log_file: str = os.getenv("LOG_FILE", "")

    # Plain-text greeting returned by ``GET /``.
    banner: str = os.getenv("BANNER", "Car Ordering API - Use /api/cars for CRUD operations")

    # When disabled, orders are accepted without checking the make, model
    # and color against the inventory catalog.
    inventory_check: bool = _env_flag("INVENTORY_CHECK", "true")

    # Optional JSON file replacing the built-in catalog.  Expected shape:
    # {"models": {"Toyota": ["Camry", ...]}, "colors": ["Black", ...]}
    catalog_file: str = os.getenv("CATALOG_FILE", "")

    # The lead (at least 28 days a month) must cover the jitter; OrderService
    # refuses settings that could deliver before the order date.
    delivery_lead_months: int = int(os.getenv("DELIVERY_LEAD_MONTHS", "6"))
    delivery_jitter_days: int = int(os.getenv("DELIVERY_JITTER_DAYS", "100"))

    # Bind address used by ``run.py``.
    host: str = os.getenv("HOST", "0.0.0.0")
    port: int = int(os.getenv("PORT", "8000"))


# Field defaults are read when this module is imported; set the
# environment first.  Tests build their own ``Settings(...)`` instead.
settings = Settings()
