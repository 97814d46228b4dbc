"""Application service: Remove Item use case."""

from __future__ import annotations

import logging

from classroom.application.pizza_session import PizzaSession

logger = logging.getLogger(__name__)


class RemoveItemHandler:

    def __init__(self, session: PizzaSession) -> None:
        self._session = session

    def handle(self, item_id: int) -> None:
        cart = self._session.cart.value
        cart.remove(item_id)
        self._session.cart.value = cart
        logger.debug("Removed item #%d", item_id)
