"""Pizza catalog entries and the options a customer can pick per pizza.

The catalog is static: pizzas are never added, removed or repriced while
a session is running.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from classroom.domain.exceptions import ValidationError
from classroom.domain.model.value_objects import Money


class Size(Enum):
    SMALL = "small"
    MEDIUM = "medium"
    LARGE = "large"

    @property
    def label(self) -> str:
        return self.value.capitalize()

    @staticmethod
    def parse(text: str) -> Size:
        try:
            return Size(text.strip().lower())
        except ValueError:
            choices = ", ".join(s.value for s in Size)
            raise ValidationError(f"Unknown size '{text}'. Choose one of: {choices}")


class Crust(Enum):
    REGULAR = "regular"
    THIN = "thin"
    THICK = "thick"

    @property
    def label(self) -> str:
        return self.value.capitalize()

    @staticmethod
    def parse(text: str) -> Crust:
        try:
            return Crust(text.strip().lower())
        except ValueError:
            choices = ", ".join(c.value for c in Crust)
            raise ValidationError(f"Unknown crust '{text}'. Choose one of: {choices}")


DEFAULT_SIZE = Size.SMALL
DEFAULT_CRUST = Crust.REGULAR


@dataclass(frozen=True)
class Pizza:
    """A pizza on the menu."""

    name: str
    base_price: Money
    description: str
    image: str
