"""Application service: Show Guesses use case (query)."""

from __future__ import annotations

import math
from decimal import Decimal

from classroom.application.dto import GuessDTO
from classroom.application.guess_session import GuessSession
from classroom.domain.model.guess import Guess
from classroom.domain.service.root_scorer import classify


class ShowGuessesHandler:

    def __init__(self, session: GuessSession) -> None:
        self._session = session

    def handle(self) -> list[GuessDTO]:
        """All guesses of the current round, newest first."""
        precision = self._session.precision.value
        return [self.to_dto(guess, precision) for guess in reversed(self._session.guesses.value)]

    @staticmethod
    def to_dto(guess: Guess, precision: int) -> GuessDTO:
        return GuessDTO(
            number=guess.number,
            value=guess.value,
            correct_digits=guess.correct_digits,
            squared=format_number(guess.squared),
            rating=classify(precision, guess.correct_digits).value,
        )


def format_number(value: float) -> str:
    """Render a float the way a browser prints a number.

    Magnitudes from 1e-6 up to 1e21 are written out in full (113, 0.00001).
    Anything else gets a short exponent (1e-7, 1e+21).
    """
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    if value == 0:
        return "0"

    sign = "-" if value < 0 else ""
    # shortest round-trip digits
    _, digit_tuple, exponent = Decimal(repr(abs(value))).as_tuple()
    digits = "".join(str(d) for d in digit_tuple)
    stripped = digits.rstrip("0")
    exponent += len(digits) - len(stripped)
    digits = stripped

    count = len(digits)
    point = exponent + count  # position of the decimal point within digits
    if count <= point <= 21:
        return sign + digits + "0" * (point - count)
    if 0 < point <= 21:
        return f"{sign}{digits[:point]}.{digits[point:]}"
    if -6 < point <= 0:
        return sign + "0." + "0" * -point + digits

    mantissa = digits[0] + (f".{digits[1:]}" if count > 1 else "")
    power = point - 1
    return f"{sign}{mantissa}e{'+' if power >= 0 else '-'}{abs(power)}"
