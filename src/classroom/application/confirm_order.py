"""Application service: Confirm Order use case.

Turns the cart into an order confirmation message and empties it.
Confirming an empty cart does nothing at all.
"""

from __future__ import annotations

import logging

from classroom.application.pizza_session import PizzaSession

logger = logging.getLogger(__name__)


class ConfirmOrderHandler:

    def __init__(self, session: PizzaSession) -> None:
        self._session = session

    def handle(self) -> str | None:
        """Return the confirmation message, or None if the cart was empty."""
        cart = self._session.cart.value
        confirmation = cart.confirm()
        if confirmation is None:
            logger.debug("Confirm ignored: cart total is zero")
            return None

        self._session.order_message.value = confirmation.message
        self._session.cart.value = cart
        logger.info(
            "Order confirmed: %d line(s), total %s",
            len(confirmation.lines), confirmation.total,
        )
        return confirmation.message
