"""Read-only JSON-file-backed implementation of CatalogRepository."""

from __future__ import annotations

import json
import logging
from pathlib import Path

from classroom.domain.exceptions import ValidationError
from classroom.domain.model.pizza import Pizza
from classroom.domain.model.value_objects import Money
from classroom.domain.repository.catalog_repository import CatalogRepository

logger = logging.getLogger(__name__)


class JsonCatalogRepository(CatalogRepository):
    """Loads the menu once; the file is never written back."""

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path
        self._pizzas = self._load()

    # --- CatalogRepository interface ------------------------------------------

    def get_by_index(self, index: int) -> Pizza | None:
        if 0 <= index < len(self._pizzas):
            return self._pizzas[index]
        return None

    def get_by_name(self, name: str) -> int | None:
        for index, pizza in enumerate(self._pizzas):
            if pizza.name.lower() == name.strip().lower():
                return index
        return None

    def list_all(self) -> list[Pizza]:
        return list(self._pizzas)

    # --- Serialization helpers ------------------------------------------------

    def _load(self) -> list[Pizza]:
        raw = json.loads(self._file_path.read_text(encoding="utf-8"))
        if not isinstance(raw, list):
            raise ValidationError(f"Catalog {self._file_path} must hold a JSON list")
        pizzas = [
            Pizza(
                name=item["name"],
                base_price=Money.of(item["base_price"]),
                description=item.get("description", ""),
                image=item.get("image", ""),
            )
            for item in raw
        ]
        logger.debug("Loaded %d pizzas from %s", len(pizzas), self._file_path)
        return pizzas
