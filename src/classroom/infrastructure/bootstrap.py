"""Composition root: wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.
"""

from __future__ import annotations

import random
from pathlib import Path

from classroom.application.guess_session import DEFAULT_PRECISION, GuessSession
from classroom.application.pizza_session import PizzaSession
from classroom.infrastructure.persistence.json_catalog_repository import (
    JsonCatalogRepository,
)

# The menu ships inside the package, next to this module.
_DATA_DIR = Path(__file__).resolve().parent / "data"


def catalog_repository() -> JsonCatalogRepository:
    return JsonCatalogRepository(_DATA_DIR / "pizzas.json")


def pizza_session() -> PizzaSession:
    return PizzaSession(catalog_repository())


def guess_session(
    precision: int = DEFAULT_PRECISION,
    seed: int | None = None,
    target: float | None = None,
) -> GuessSession:
    return GuessSession(rng=random.Random(seed), precision=precision, target=target)
