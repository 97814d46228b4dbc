"""Application service: Set Target use case.

The player may type their own target.  Text that does not start with a
finite number is ignored and the current target stays.
"""

from __future__ import annotations

import logging
import math
import re

from classroom.application.guess_session import GuessSession

logger = logging.getLogger(__name__)

_LEADING_FLOAT = re.compile(r"\s*[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")


class SetTargetHandler:

    def __init__(self, session: GuessSession) -> None:
        self._session = session

    def handle(self, raw: str) -> bool:
        """Return True when the target changed."""
        match = _LEADING_FLOAT.match(raw)
        value = float(match.group(0)) if match else math.nan
        if not math.isfinite(value):
            logger.debug("Ignoring target input %r", raw)
            return False
        self._session.target.value = value
        return True
