"""Per-session state of the pizza storefront."""

from __future__ import annotations

from dataclasses import dataclass, field

from classroom.application.state import State
from classroom.domain.model.cart import Cart
from classroom.domain.model.pizza import DEFAULT_CRUST, DEFAULT_SIZE, Crust, Size
from classroom.domain.repository.catalog_repository import CatalogRepository


@dataclass
class Selection:
    """The size/crust pickers of one menu row."""

    size: State[Size] = field(default_factory=lambda: State(DEFAULT_SIZE))
    crust: State[Crust] = field(default_factory=lambda: State(DEFAULT_CRUST))

    def reset(self) -> None:
        self.size.value = DEFAULT_SIZE
        self.crust.value = DEFAULT_CRUST


class PizzaSession:
    """Everything one customer's storefront view keeps between events.

    ``selections[i]`` belongs to catalog row ``i``.
    """

    def __init__(self, catalog: CatalogRepository) -> None:
        self.catalog = catalog
        self.selections = [Selection() for _ in catalog.list_all()]
        self.cart: State[Cart] = State(Cart())
        self.order_message: State[str] = State("")
