"""Application service: Pick New Target use case.

Rolls a fresh target and starts the round over: the guess log and
counter are cleared and the guess field is seeded with the integer part
of the new root.
"""

from __future__ import annotations

import logging

from classroom.application.guess_session import GuessSession
from classroom.domain.service.root_scorer import generate_target, initial_guess

logger = logging.getLogger(__name__)


class PickTargetHandler:

    def __init__(self, session: GuessSession) -> None:
        self._session = session

    def handle(self) -> int:
        target = generate_target(self._session.rng)
        self._session.target.value = target
        self._session.guesses.value = []
        self._session.current_guess.value = initial_guess(target)
        self._session.guess_count.value = 0
        logger.info("New target picked")
        logger.debug("Target is %d", target)
        return target
