"""Application service: Add To Cart use case.

Snapshots a menu row's current size/crust, prices it, appends it to the
cart and puts the row's pickers back to their defaults.
"""

from __future__ import annotations

import logging

from classroom.application.dto import CartLineDTO
from classroom.application.pizza_session import PizzaSession
from classroom.domain.exceptions import EntityNotFoundError

logger = logging.getLogger(__name__)


class AddToCartHandler:

    def __init__(self, session: PizzaSession) -> None:
        self._session = session

    def handle(self, pizza_index: int) -> CartLineDTO:
        pizza = self._session.catalog.get_by_index(pizza_index)
        if pizza is None:
            raise EntityNotFoundError(f"No pizza on menu row {pizza_index}")

        selection = self._session.selections[pizza_index]
        cart = self._session.cart.value
        item = cart.add(pizza, selection.size.value, selection.crust.value)
        self._session.cart.value = cart

        selection.reset()

        logger.info(
            "Added %s (%s, %s) as item #%d at %s",
            item.name, item.size.value, item.crust.value, item.id, item.unit_price,
        )
        return CartLineDTO(
            id=item.id,
            name=item.name,
            details=item.details,
            quantity=item.quantity.value,
            unit_price=str(item.unit_price),
            line_total=str(item.line_total),
        )
