"""Application service: Select Size/Crust use case."""

from __future__ import annotations

from classroom.application.pizza_session import PizzaSession
from classroom.domain.exceptions import EntityNotFoundError
from classroom.domain.model.pizza import Crust, Size


class SelectOptionHandler:

    def __init__(self, session: PizzaSession) -> None:
        self._session = session

    def handle(
        self,
        pizza_index: int,
        size: Size | None = None,
        crust: Crust | None = None,
    ) -> None:
        """Change the pickers of one menu row.  Options left as None stay put."""
        if not 0 <= pizza_index < len(self._session.selections):
            raise EntityNotFoundError(f"No pizza on menu row {pizza_index}")

        selection = self._session.selections[pizza_index]
        if size is not None:
            selection.size.value = size
        if crust is not None:
            selection.crust.value = crust
