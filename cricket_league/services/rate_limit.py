"""Per-identity cooldown between accepted scoring events."""

from __future__ import annotations

import time
from typing import Callable, Dict

from .locks import ReadWriteLock


class RateLimiter:
    """Throttle an identity that submits again within ``cooldown`` seconds.

    Entries are never evicted unless :meth:`sweep` is called; sweeping only
    drops entries whose cooldown has already elapsed, so it cannot change
    the outcome of :meth:`check`.
    """

    def __init__(
        self,
        cooldown: float = 2.0,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self.cooldown = float(cooldown)
        self._clock = clock
        self._last_seen: Dict[str, float] = {}
        self._lock = ReadWriteLock()

    def __len__(self) -> int:
        with self._lock.read_locked():
            return len(self._last_seen)

    def _throttled(self, identity: str, now: float) -> bool:
        last = self._last_seen.get(identity)
        return last is not None and now - last < self.cooldown

    def check(self, identity: str) -> bool:
        """Return True if ``identity`` is still inside its cooldown."""

        with self._lock.read_locked():
            return self._throttled(identity, self._clock())

    def record(self, identity: str) -> None:
        """Stamp ``identity`` as seen now, overwriting any earlier stamp."""

        with self._lock.write_locked():
            self._last_seen[identity] = self._clock()

    def try_acquire(self, identity: str) -> bool:
        """Check and record in one exclusive section.

        Returns False (and records nothing) when throttled, so rejected
        requests never extend the cooldown.
        """

        with self._lock.write_locked():
            now = self._clock()
            if self._throttled(identity, now):
                return False
            self._last_seen[identity] = now
            return True

    def sweep(self) -> int:
        """Forget identities whose cooldown has elapsed; return how many."""

        with self._lock.write_locked():
            now = self._clock()
            expired = [
                identity
                for identity, last in self._last_seen.items()
                if now - last >= self.cooldown
            ]
            for identity in expired:
                del self._last_seen[identity]
        return len(expired)


__all__ = ["RateLimiter"]
