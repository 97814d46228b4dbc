"""Application service: Submit Guess use case.

Every submission is recorded, including text that is not a number:
the counter always goes up and invalid guesses are logged with NaN.
"""

from __future__ import annotations

import logging

from classroom.application.dto import GuessDTO
from classroom.application.guess_session import GuessSession
from classroom.application.show_guesses import ShowGuessesHandler
from classroom.domain.model.guess import Guess
from classroom.domain.service.root_scorer import count_correct_digits, square_of

logger = logging.getLogger(__name__)


class SubmitGuessHandler:

    def __init__(self, session: GuessSession) -> None:
        self._session = session

    def handle(self, text: str | None = None) -> GuessDTO:
        """Score the guess field, or *text* after typing it into the field."""
        if text is not None:
            self._session.current_guess.value = text

        self._session.guess_count.value += 1
        value = self._session.current_guess.value

        guess = Guess(
            number=self._session.guess_count.value,
            value=value,
            correct_digits=count_correct_digits(value, self._session.target.value),
            squared=square_of(value),
        )
        self._session.guesses.value = [*self._session.guesses.value, guess]

        if not guess.is_valid:
            logger.debug("Guess #%d %r is not a number", guess.number, value)
        logger.info("Guess #%d scored %d correct digit(s)", guess.number, guess.correct_digits)
        return ShowGuessesHandler.to_dto(guess, self._session.precision.value)
