"""Service layer: throttling, caching, ingest and query."""

from .ingest import ScoreIngest, is_valid_roll_number
from .rate_limit import RateLimiter
from .scoreboard import ScoreboardQuery
from .scoreboard_cache import ScoreboardCache
from .store import MongoParticipantStore, ParticipantStore

__all__ = [
    "MongoParticipantStore",
    "ParticipantStore",
    "RateLimiter",
    "ScoreIngest",
    "ScoreboardCache",
    "ScoreboardQuery",
    "is_valid_roll_number",
]
