"""Rules of the square-root guessing game.

Nothing here raises on bad input: text that is not a number parses to
NaN and scores zero correct digits.
"""

from __future__ import annotations

import math
import random
import re

from classroom.domain.model.guess import GuessRating

MIN_TARGET = 50
MAX_TARGET = 250
ROOT_DECIMALS = 10

_NUMBER_PATTERN = re.compile(r"[+-]?[0-9]*\.?[0-9]+|[+-]?[0-9]+\.?[0-9]*")
_DEGENERATE = frozenset({".", "-", "+", "-."})


def generate_target(rng: random.Random | None = None) -> int:
    """Pick a target uniformly from [MIN_TARGET, MAX_TARGET]."""
    rng = rng or random
    span = MAX_TARGET - MIN_TARGET + 1
    return math.floor(rng.random() * span) + MIN_TARGET


def initial_guess(target: float) -> str:
    """Starting text for the guess field: the root's integer part and a dot."""
    return f"{math.floor(math.sqrt(abs(target)))}."


def is_valid_number(text: str) -> bool:
    return (
        bool(text)
        and text not in _DEGENERATE
        and _NUMBER_PATTERN.fullmatch(text) is not None
    )


def parse_guess(text: str) -> float:
    """The numeric value of *text*, or NaN when it is not a number."""
    if not is_valid_number(text):
        return math.nan
    return float(text)


def root_decimals(target: float) -> str:
    """The first ROOT_DECIMALS digits after the point of sqrt(|target|)."""
    return f"{math.sqrt(abs(target)):.{ROOT_DECIMALS}f}".split(".")[1]


def count_correct_digits(text: str, target: float) -> int:
    """Count leading decimal digits of *text* that match the true root.

    Counting starts at the first decimal place and stops at the first
    mismatch.  Digits typed past ROOT_DECIMALS never match.
    """
    value = parse_guess(text)
    if math.isnan(value) or math.isinf(value) or value < 0:
        return 0

    typed = text.split(".")[1] if "." in text else ""
    actual = root_decimals(target)

    correct = 0
    for position, digit in enumerate(typed):
        if position >= len(actual) or digit != actual[position]:
            break
        correct += 1
    return correct


def square_of(text: str) -> float:
    value = parse_guess(text)
    return value * value


def classify(precision: int, correct_digits: int) -> GuessRating:
    diff = precision - correct_digits
    if diff <= 0:
        return GuessRating.CORRECT
    if diff == 1:
        return GuessRating.VERY_CLOSE
    if diff == 2:
        return GuessRating.CLOSE
    return GuessRating.FAR
