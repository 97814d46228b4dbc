"""Application service: Show Cart use case (query)."""

from __future__ import annotations

from classroom.application.dto import CartDTO, CartLineDTO
from classroom.application.pizza_session import PizzaSession
from classroom.domain.model.cart import Cart


class ShowCartHandler:

    def __init__(self, session: PizzaSession) -> None:
        self._session = session

    def handle(self) -> CartDTO:
        return self._to_dto(self._session.cart.value, self._session.order_message.value)

    @staticmethod
    def _to_dto(cart: Cart, order_message: str) -> CartDTO:
        total = cart.total
        return CartDTO(
            items=[
                CartLineDTO(
                    id=item.id,
                    name=item.name,
                    details=item.details,
                    quantity=item.quantity.value,
                    unit_price=str(item.unit_price),
                    line_total=str(item.line_total),
                )
                for item in cart.items
            ],
            total=str(total),
            can_confirm=not total.is_zero,
            order_message=order_message,
        )
