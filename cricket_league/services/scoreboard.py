"""Ranked scoreboard reads, served from the snapshot cache when fresh."""

from __future__ import annotations

import logging
from typing import List

from ..models import Participant
from .scoreboard_cache import ScoreboardCache
from .store import ParticipantStore

logger = logging.getLogger(__name__)


class ScoreboardQuery:
    """Participants by score, highest first.

    Participants with equal scores come back in store iteration order, which
    is not guaranteed to be stable between reads.
    """

    def __init__(self, store: ParticipantStore, cache: ScoreboardCache) -> None:
        self.store = store
        self.cache = cache

    def fetch(self) -> List[Participant]:
        participants, found = self.cache.get()
        if found:
            return participants

        participants = self.store.list_by_score()
        self.cache.put(participants)
        logger.debug("Scoreboard cache refilled with %d participants", len(participants))
        return participants


__all__ = ["ScoreboardQuery"]
