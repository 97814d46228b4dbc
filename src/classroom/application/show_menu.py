"""Application service: Show Menu use case (query)."""

from __future__ import annotations

from classroom.application.dto import MenuRowDTO
from classroom.application.pizza_session import PizzaSession
from classroom.domain.service.pricing import price_for


class ShowMenuHandler:

    def __init__(self, session: PizzaSession) -> None:
        self._session = session

    def handle(self) -> list[MenuRowDTO]:
        rows: list[MenuRowDTO] = []
        for index, pizza in enumerate(self._session.catalog.list_all()):
            selection = self._session.selections[index]
            size = selection.size.value
            crust = selection.crust.value
            rows.append(
                MenuRowDTO(
                    index=index,
                    name=pizza.name,
                    description=pizza.description,
                    image=pizza.image,
                    base_price=str(pizza.base_price),
                    size=size.value,
                    crust=crust.value,
                    unit_price=str(price_for(pizza.base_price, size, crust)),
                )
            )
        return rows
