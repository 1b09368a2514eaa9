"""
Inventory catalog of orderable cars.

The catalog maps each make to the models it offers and holds the set
of paint colors available for every model.  All lookups are case
insensitive, but makes, models and colors are listed with the spelling
and order in which they were configured.  A catalog is built once at
startup and never mutated afterwards.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Dict, List, Mapping, Optional, Sequence, Tuple

from car_orders_api.app.core.errors import CatalogError


logger = logging.getLogger(__name__)


DEFAULT_MODELS: Dict[str, List[str]] = {
    "Toyota": ["Camry", "Corolla", "RAV4", "Highlander", "Prius"],
    "BMW": ["3 Series", "5 Series", "X3", "X5", "M3"],
}

DEFAULT_COLORS: List[str] = ["Black", "White", "Red", "Purple"]


def _fold(value: Optional[str]) -> str:
    return value.casefold() if value else ""


class InventoryCatalog:
    """Static makes/models/colors catalog."""

    def __init__(
        self,
        models: Optional[Mapping[str, Sequence[str]]] = None,
        colors: Optional[Sequence[str]] = None,
    ) -> None:
        if models is None:
            models = DEFAULT_MODELS
        if colors is None:
            colors = DEFAULT_COLORS
        # folded make -> (display name, models as configured, folded models)
        self._makes: Dict[str, Tuple[str, Tuple[str, ...], frozenset]] = {}
        for make, make_models in models.items():
            listed = tuple(make_models)
            self._makes[_fold(make)] = (make, listed, frozenset(_fold(m) for m in listed))
        self._colors: Tuple[str, ...] = tuple(colors)
        self._folded_colors = frozenset(_fold(c) for c in self._colors)

    @classmethod
    def from_file(cls, path: str) -> "InventoryCatalog":
        """Load a catalog from a JSON file.

        The document must be an object with a ``models`` mapping of make
        to a list of model names and a ``colors`` list.  Raises
        ``CatalogError`` if the file does not have that shape or lists a
        make twice under spellings that differ only in case.
        """
        try:
            with open(Path(path), "r", encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, json.JSONDecodeError) as exc:
            raise CatalogError(f"Cannot read catalog file {path}: {exc}") from exc
        if not isinstance(data, dict):
            raise CatalogError("Catalog must be a JSON object")
        models = data.get("models")
        colors = data.get("colors")
        if not isinstance(models, dict) or not all(
            isinstance(make, str) and isinstance(names, list) and all(isinstance(n, str) for n in names)
            for make, names in models.items()
        ):
            raise CatalogError("Catalog 'models' must map make names to lists of model names")
        if not isinstance(colors, list) or not all(isinstance(c, str) for c in colors):
            raise CatalogError("Catalog 'colors' must be a list of color names")
        seen: Dict[str, str] = {}
        for make in models:
            if _fold(make) in seen:
                raise CatalogError(f"Catalog lists make {make!r} more than once (also as {seen[_fold(make)]!r})")
            seen[_fold(make)] = make
        logger.info("Loaded catalog from %s (%d makes, %d colors)", path, len(models), len(colors))
        return cls(models=models, colors=colors)

    def makes(self) -> List[str]:
        return [display for display, _, _ in self._makes.values()]

    def models_for(self, make: Optional[str]) -> Optional[List[str]]:
        """Return the models offered for ``make`` or ``None`` if the make is unknown."""
        entry = self._makes.get(_fold(make))
        if entry is None:
            return None
        return list(entry[1])

    def colors(self) -> List[str]:
        return list(self._colors)

    def is_available(self, make: Optional[str], model: Optional[str], color: Optional[str]) -> bool:
        """Check whether the make/model/color combination can be ordered."""
        entry = self._makes.get(_fold(make))
        if entry is None:
            return False
        return _fold(model) in entry[2] and _fold(color) in self._folded_colors
