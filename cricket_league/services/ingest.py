"""Validate scoring events and apply them to the store."""

from __future__ import annotations

import logging
import re
from datetime import datetime
from typing import Callable

from ..core.errors import ClientInputError, RateLimitedError
from ..core.time import utcnow
from .rate_limit import RateLimiter
from .store import ParticipantStore

logger = logging.getLogger(__name__)

ROLL_NUMBER_RE = re.compile(r"[0-9]{10}")

ROLL_NUMBER_MESSAGE = "Roll number must be exactly 10 digits"
NAME_REQUIRED_MESSAGE = "Name is required"
RATE_LIMITED_MESSAGE = "Too many requests. Please wait a few seconds."


def is_valid_roll_number(roll_number: str) -> bool:
    """Exactly ten ASCII digits, nothing else."""
    return ROLL_NUMBER_RE.fullmatch(roll_number) is not None


class ScoreIngest:
    def __init__(
        self,
        store: ParticipantStore,
        limiter: RateLimiter,
        clock: Callable[[], datetime] = utcnow,
    ) -> None:
        self.store = store
        self.limiter = limiter
        self._clock = clock

    def submit(self, roll_number: str, name: str, shot: int) -> None:
        """Record one shot for ``roll_number``.

        Checks run in order and the first failure wins: roll number format,
        name presence, then the cooldown. The cooldown is stamped before the
        store write so a second concurrent submission is throttled even while
        the first is still in flight; a failed write keeps the stamp.
        """

        if not is_valid_roll_number(roll_number):
            raise ClientInputError(ROLL_NUMBER_MESSAGE)
        if not name:
            raise ClientInputError(NAME_REQUIRED_MESSAGE)
        if not self.limiter.try_acquire(roll_number):
            logger.debug("Throttled shot from %s", roll_number)
            raise RateLimitedError(RATE_LIMITED_MESSAGE)

        self.store.record_shot(roll_number, name, shot, self._clock())
        logger.debug("Recorded shot %d for %s", shot, roll_number)


__all__ = [
    "NAME_REQUIRED_MESSAGE",
    "RATE_LIMITED_MESSAGE",
    "ROLL_NUMBER_MESSAGE",
    "ScoreIngest",
    "is_valid_roll_number",
]
