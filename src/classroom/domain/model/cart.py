"""Cart aggregate, the core of the storefront.

The Cart owns its line items and the counter that hands out their ids.
All business invariants are enforced here.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from classroom.domain.model.pizza import Crust, Pizza, Size
from classroom.domain.model.value_objects import Money, Quantity
from classroom.domain.service.pricing import describe_selection, price_for


@dataclass
class CartItem:
    """Captures the price snapshot of a configured pizza at add time.

    Mutable only via ``Cart.update_quantity()``.  The chosen size, crust
    and ``unit_price`` never change after the item is created.
    """

    id: int
    name: str
    base_price: Money
    size: Size
    crust: Crust
    unit_price: Money  # locked when added to the cart
    quantity: Quantity = field(default_factory=lambda: Quantity(1))

    @property
    def line_total(self) -> Money:
        return self.unit_price * self.quantity.value

    @property
    def details(self) -> str:
        return describe_selection(self.base_price, self.size, self.crust)


@dataclass(frozen=True)
class OrderConfirmation:
    """What the customer sees after confirming a non-empty cart."""

    lines: list[str]
    total: Money

    @property
    def message(self) -> str:
        summary = "\n".join(self.lines)
        return (
            f"Order Confirmed!\n{summary}\nTotal: {self.total}"
            f"\n\nThank you for your order!"
        )


@dataclass
class Cart:
    """Aggregate root for the items a customer is about to order.

    Ids start at 0 and only ever go up, including across confirmations,
    so no two items of one session share an id.  The same pizza with the
    same options added twice gives two separate items.
    """

    items: list[CartItem] = field(default_factory=list)
    next_id: int = 0

    # --- Commands -------------------------------------------------------------

    def add(self, pizza: Pizza, size: Size, crust: Crust) -> CartItem:
        """Append one pizza with the given options at quantity 1."""
        item = CartItem(
            id=self.next_id,
            name=pizza.name,
            base_price=pizza.base_price,
            size=size,
            crust=crust,
            unit_price=price_for(pizza.base_price, size, crust),
        )
        self.next_id += 1
        self.items.append(item)
        return item

    def update_quantity(self, item_id: int, quantity: Quantity) -> None:
        """Replace an item's quantity.  Unknown ids are ignored."""
        item = self._find_item(item_id)
        if item is not None:
            item.quantity = quantity

    def remove(self, item_id: int) -> None:
        """Drop an item.  Unknown ids are ignored."""
        self.items = [item for item in self.items if item.id != item_id]

    def confirm(self) -> OrderConfirmation | None:
        """Summarise and empty the cart.

        Returns None and leaves the cart untouched when there is nothing
        to pay for.
        """
        total = self.total
        if total.is_zero:
            return None

        confirmation = OrderConfirmation(
            lines=[
                f"{item.quantity}x {item.name} — {item.line_total}"
                for item in self.items
            ],
            total=total,
        )
        self.items = []
        return confirmation

    # --- Computed properties --------------------------------------------------

    @property
    def total(self) -> Money:
        result = Money.zero()
        for item in self.items:
            result = result + item.line_total
        return result

    @property
    def is_empty(self) -> bool:
        return not self.items

    # --- Internal helpers -----------------------------------------------------

    def _find_item(self, item_id: int) -> CartItem | None:
        for item in self.items:
            if item.id == item_id:
                return item
        return None
