"""Pricing rules for a configured pizza.

Pure functions only: no state, no I/O. Upcharges are flat dollar amounts
added on top of the pizza's base price.
"""

from __future__ import annotations

from classroom.domain.model.pizza import Crust, Size
from classroom.domain.model.value_objects import Money

SIZE_UPCHARGES: dict[Size, Money] = {
    Size.SMALL: Money.of("0"),
    Size.MEDIUM: Money.of("1"),
    Size.LARGE: Money.of("2"),
}

CRUST_UPCHARGES: dict[Crust, Money] = {
    Crust.REGULAR: Money.of("0"),
    Crust.THIN: Money.of("1"),
    Crust.THICK: Money.of("1"),
}


def price_for(base_price: Money, size: Size, crust: Crust) -> Money:
    """Unit price of one pizza with the given size and crust."""
    return base_price + SIZE_UPCHARGES[size] + CRUST_UPCHARGES[crust]


def describe_selection(base_price: Money, size: Size, crust: Crust) -> str:
    """Breakdown shown under a cart line, e.g.
    ``Base: $8.00 | Large: +$2.00 | Thick crust: +$1.00``.
    """
    size_upcharge = SIZE_UPCHARGES[size]
    crust_upcharge = CRUST_UPCHARGES[crust]

    size_text = size.label if size_upcharge.is_zero else f"{size.label}: +{size_upcharge}"
    crust_text = (
        f"{crust.label} crust"
        if crust_upcharge.is_zero
        else f"{crust.label} crust: +{crust_upcharge}"
    )
    return f"Base: {base_price} | {size_text} | {crust_text}"
