"""Per-session state of the square-root game."""

from __future__ import annotations

import math
import random

from classroom.application.state import State
from classroom.domain.exceptions import ValidationError
from classroom.domain.model.guess import Guess
from classroom.domain.service.root_scorer import generate_target, initial_guess

DEFAULT_PRECISION = 5


class GuessSession:
    """The target, the typed guess and the guess log of one player."""

    def __init__(
        self,
        rng: random.Random | None = None,
        precision: int = DEFAULT_PRECISION,
        target: float | None = None,
    ) -> None:
        if precision < 0:
            raise ValidationError("Precision cannot be negative")
        if target is not None and not math.isfinite(target):
            raise ValidationError(f"Target must be a finite number, got {target}")
        self.rng = rng or random.Random()
        start = target if target is not None else generate_target(self.rng)
        self.target: State[float] = State(start)
        self.precision: State[int] = State(precision)
        self.current_guess: State[str] = State(initial_guess(start))
        self.guesses: State[list[Guess]] = State([])
        self.guess_count: State[int] = State(0)
