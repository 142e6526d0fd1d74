"""Short-lived snapshot of the ranked scoreboard."""

from __future__ import annotations

import time
from typing import Callable, List, Optional, Sequence, Tuple

from ..models import Participant
from .locks import ReadWriteLock


class ScoreboardCache:
    """Memoize the full ranked participant list for ``ttl`` seconds.

    States: cold (never filled), warm (age < ttl) and stale (age >= ttl).
    Only :meth:`get` observes staleness; the next :meth:`put` makes the
    snapshot warm again. Concurrent misses may each refill and the last
    ``put`` wins.
    """

    def __init__(
        self,
        ttl: float = 2.0,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self.ttl = float(ttl)
        self._clock = clock
        self._snapshot: Optional[Tuple[Participant, ...]] = None
        self._captured_at = 0.0
        self._lock = ReadWriteLock()

    def get(self) -> Tuple[List[Participant], bool]:
        """Return ``(participants, True)`` on a fresh hit, ``([], False)`` otherwise."""

        with self._lock.read_locked():
            snapshot = self._snapshot
            if snapshot is None or self._clock() - self._captured_at >= self.ttl:
                return [], False
            return list(snapshot), True

    def put(self, participants: Sequence[Participant]) -> None:
        with self._lock.write_locked():
            self._snapshot = tuple(participants)
            self._captured_at = self._clock()


__all__ = ["ScoreboardCache"]
