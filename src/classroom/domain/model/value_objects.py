"""Value Objects shared across the storefront.

Value Objects are immutable and compared by value, not identity.
They encapsulate validation so invalid values can never exist.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from decimal import Decimal, InvalidOperation

from classroom.domain.exceptions import ValidationError


@dataclass(frozen=True)
class Money:
    """Monetary amount in dollars.

    Uses Decimal so that base prices plus whole-dollar upcharges always
    total to exact cents.
    """

    amount: Decimal

    def __post_init__(self) -> None:
        if not isinstance(self.amount, Decimal):
            raise ValidationError(
                f"Money amount must be a Decimal, got {type(self.amount).__name__}"
            )
        if self.amount < Decimal("0"):
            raise ValidationError(
                f"Money amount cannot be negative, got {self.amount}"
            )

    # --- Arithmetic helpers ---------------------------------------------------

    def __add__(self, other: Money) -> Money:
        return Money(self.amount + other.amount)

    def __mul__(self, factor: int) -> Money:
        if not isinstance(factor, int):
            raise TypeError(f"Can only multiply Money by int, got {type(factor).__name__}")
        return Money(self.amount * factor)

    @property
    def is_zero(self) -> bool:
        return self.amount == Decimal("0")

    # --- Display --------------------------------------------------------------

    def __str__(self) -> str:
        return f"${self.amount:.2f}"

    # --- Factories ------------------------------------------------------------

    @staticmethod
    def of(amount: str | float | int | Decimal) -> Money:
        """Convenient factory that coerces to Decimal safely."""
        try:
            return Money(Decimal(str(amount)))
        except (InvalidOperation, ValueError) as exc:
            raise ValidationError(f"Invalid money amount: {amount!r}") from exc

    @staticmethod
    def zero() -> Money:
        return Money(Decimal("0.00"))


MIN_QUANTITY = 1
MAX_QUANTITY = 99

_LEADING_INT = re.compile(r"\s*[+-]?[0-9]+")


@dataclass(frozen=True)
class Quantity:
    """How many identical pizzas a cart line holds, between 1 and 99."""

    value: int

    def __post_init__(self) -> None:
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            raise ValidationError(
                f"Quantity must be an integer, got {type(self.value).__name__}"
            )
        if self.value < MIN_QUANTITY:
            raise ValidationError("Quantity must be positive")
        if self.value > MAX_QUANTITY:
            raise ValidationError(f"Quantity cannot exceed {MAX_QUANTITY}")

    def __str__(self) -> str:
        return str(self.value)

    @staticmethod
    def from_input(raw: str | int | None) -> Quantity:
        """Build a Quantity from whatever the quantity widget sent.

        Leading digits are read the way a number input reads them ("12abc"
        is 12) and text without any falls back to 1. Numbers outside the
        widget's min/max are pulled back into range.
        """
        if isinstance(raw, int) and not isinstance(raw, bool):
            value = raw
        else:
            match = _LEADING_INT.match(raw) if isinstance(raw, str) else None
            value = int(match.group(0)) if match else MIN_QUANTITY
        return Quantity(min(max(value, MIN_QUANTITY), MAX_QUANTITY))
