"""Data Transfer Objects: plain containers that cross layer boundaries.

DTOs carry display-ready data from the application layer to whatever
renders it, without exposing domain internals to the outside world.
Money is pre-formatted, e.g. "$11.00".
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class MenuRowDTO:
    """One catalog row with its current pickers and live price."""

    index: int
    name: str
    description: str
    image: str
    base_price: str
    size: str
    crust: str
    unit_price: str


@dataclass(frozen=True)
class CartLineDTO:
    id: int
    name: str
    details: str  # e.g. "Base: $8.00 | Large: +$2.00 | Thick crust: +$1.00"
    quantity: int
    unit_price: str
    line_total: str


@dataclass(frozen=True)
class CartDTO:
    items: list[CartLineDTO]
    total: str
    can_confirm: bool
    order_message: str


@dataclass(frozen=True)
class GuessDTO:
    number: int
    value: str
    correct_digits: int
    squared: str  # "NaN" for invalid guesses
    rating: str  # "correct" | "very-close" | "close" | "far"
