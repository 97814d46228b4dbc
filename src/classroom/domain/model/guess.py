"""Guess records for the square-root game."""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum


class GuessRating(Enum):
    """How close a guess came to the requested precision."""

    CORRECT = "correct"
    VERY_CLOSE = "very-close"
    CLOSE = "close"
    FAR = "far"


@dataclass(frozen=True)
class Guess:
    """One submitted guess, kept even when the text was not a number.

    ``squared`` is NaN for invalid input.
    """

    number: int
    value: str
    correct_digits: int
    squared: float

    @property
    def is_valid(self) -> bool:
        return not math.isnan(self.squared)
