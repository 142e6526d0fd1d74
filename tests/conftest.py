import os
import threading
from datetime import datetime, timezone

import pytest

# Config is read at import time and requires a connection string.
os.environ.setdefault("MONGODB_URI", "mongodb://localhost:27017")

from fastapi.testclient import TestClient  # noqa: E402

from cricket_league.app import create_app  # noqa: E402
from cricket_league.core.errors import StoreError  # noqa: E402
from cricket_league.models import Participant  # noqa: E402
from cricket_league.services import RateLimiter, ScoreboardCache  # noqa: E402


class ManualClock:
    """Monotonic clock the tests advance by hand."""

    def __init__(self, start=1000.0):
        self.now = start

    def __call__(self):
        return self.now

    def advance(self, seconds):
        self.now += seconds


class InMemoryParticipantStore:
    """Mirrors the upsert/find semantics of the MongoDB store."""

    def __init__(self):
        self._docs = {}
        self._lock = threading.Lock()
        self.fail = False
        self.writes = 0
        self.reads = 0

    def record_shot(self, roll_number, name, shot, played_at):
        if self.fail:
            raise StoreError("Error updating score")
        with self._lock:
            self.writes += 1
            doc = self._docs.setdefault(roll_number, {"rollNumber": roll_number, "score": 0})
            doc["score"] += shot
            doc["name"] = name
            doc["lastPlayed"] = played_at

    def list_by_score(self):
        if self.fail:
            raise StoreError("Error fetching scoreboard")
        with self._lock:
            self.reads += 1
            docs = sorted(self._docs.values(), key=lambda d: d["score"], reverse=True)
            return [Participant.from_document(doc) for doc in docs]

    def score_of(self, roll_number):
        doc = self._docs.get(roll_number)
        return None if doc is None else doc["score"]

    def name_of(self, roll_number):
        doc = self._docs.get(roll_number)
        return None if doc is None else doc["name"]

    def seed(self, roll_number, name, score):
        self._docs[roll_number] = {
            "rollNumber": roll_number,
            "name": name,
            "score": score,
            "lastPlayed": datetime(2024, 1, 1, tzinfo=timezone.utc),
        }


@pytest.fixture()
def clock():
    return ManualClock()


@pytest.fixture()
def store():
    return InMemoryParticipantStore()


@pytest.fixture()
def rate_limiter(clock):
    return RateLimiter(2.0, clock=clock)


@pytest.fixture()
def scoreboard_cache(clock):
    return ScoreboardCache(2.0, clock=clock)


@pytest.fixture()
def app(store, rate_limiter, scoreboard_cache):
    return create_app(
        store=store,
        rate_limiter=rate_limiter,
        scoreboard_cache=scoreboard_cache,
        sweep_interval=0,
    )


@pytest.fixture()
def client(app):
    with TestClient(app) as test_client:
        yield test_client
