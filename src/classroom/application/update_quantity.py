"""Application service: Update Quantity use case."""

from __future__ import annotations

import logging

from classroom.application.pizza_session import PizzaSession
from classroom.domain.model.value_objects import Quantity

logger = logging.getLogger(__name__)


class UpdateQuantityHandler:

    def __init__(self, session: PizzaSession) -> None:
        self._session = session

    def handle(self, item_id: int, raw_quantity: str | int | None) -> None:
        """Set a cart item's quantity from raw widget input.

        Malformed input counts as 1 and values are kept within 1..99.
        An id that is not in the cart is ignored.
        """
        quantity = Quantity.from_input(raw_quantity)
        cart = self._session.cart.value
        cart.update_quantity(item_id, quantity)
        self._session.cart.value = cart
        logger.debug("Item #%d quantity -> %s (raw %r)", item_id, quantity, raw_quantity)
