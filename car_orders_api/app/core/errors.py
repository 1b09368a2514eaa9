"""
Domain errors raised by the service layer.

Services signal a missing order by returning ``None`` (or ``False`` for
deletes); the endpoints turn that into HTTP 404.  Rejections that the
caller can fix are raised as ``ValueError`` subclasses and mapped to
HTTP 400 by the endpoints.
"""

from typing import Optional


class InventoryError(ValueError):
    """The requested make/model/color combination is not in the catalog."""

    def __init__(self, make: Optional[str], model: Optional[str], color: Optional[str]) -> None:
        self.make = make
        self.model = model
        self.color = color
        super().__init__(f"Car '{make} {model} {color}' is not available")


class CatalogError(ValueError):
    """The inventory catalog definition is malformed."""
