"""Application service: Set Precision use case."""

from __future__ import annotations

import logging
import re

from classroom.application.guess_session import GuessSession

logger = logging.getLogger(__name__)

_LEADING_INT = re.compile(r"\s*[+-]?[0-9]+")


class SetPrecisionHandler:

    def __init__(self, session: GuessSession) -> None:
        self._session = session

    def handle(self, raw: str) -> bool:
        """Apply *raw* when it reads as a whole number >= 0.  Return True if applied."""
        match = _LEADING_INT.match(raw)
        if match is None or int(match.group(0)) < 0:
            logger.debug("Ignoring precision input %r", raw)
            return False
        self._session.precision.value = int(match.group(0))
        return True
