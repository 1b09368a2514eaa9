"""
Logging for the car ordering service.

Handlers are attached to the ``car_orders_api`` package logger rather
than the root logger, so the service's own records get a console (and
optionally a file) handler without disturbing whatever the hosting
process, uvicorn or a test runner has configured on the root.  Records
still propagate upwards.
"""

import logging
from pathlib import Path

from .config import Settings


PACKAGE_LOGGER = "car_orders_api"
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def resolve_level(name: str) -> int:
    """Translate a level name such as ``"debug"`` into its number; unknown names mean INFO."""
    level = logging.getLevelName(name.upper())
    return level if isinstance(level, int) else logging.INFO


def setup_logging(settings: Settings) -> logging.Logger:
    """Configure the package logger from ``settings``.

    The level follows ``settings.log_level`` on every call, so each
    application built by ``create_app`` applies its own level.
    Handlers are attached only the first time; ``settings.log_file``
    adds a UTF-8 file handler next to the console one.
    """
    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(resolve_level(settings.log_level))
    if logger.handlers:
        return logger

    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)
    handlers = [logging.StreamHandler()]
    if settings.log_file:
        handlers.append(logging.FileHandler(Path(settings.log_file).resolve(), encoding="utf-8"))
    for handler in handlers:
        handler.setFormatter(formatter)
        logger.addHandler(handler)
    return logger
