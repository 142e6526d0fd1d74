"""Core configuration and infrastructure helpers."""

from .config import (
    CACHE_TTL_SECONDS,
    CONNECT_TIMEOUT_SECONDS,
    HOST,
    LOG_LEVEL,
    MONGODB_COLLECTION,
    MONGODB_DB,
    MONGODB_URI,
    PORT,
    RATE_LIMIT_SECONDS,
    RATE_LIMIT_SWEEP_SECONDS,
    STORE_TIMEOUT_SECONDS,
)
from .errors import (
    ClientInputError,
    RateLimitedError,
    ScoreboardError,
    StartupError,
    StoreError,
)
from .logs import configure_logging
from .time import utcnow

__all__ = [
    "CACHE_TTL_SECONDS",
    "CONNECT_TIMEOUT_SECONDS",
    "ClientInputError",
    "HOST",
    "LOG_LEVEL",
    "MONGODB_COLLECTION",
    "MONGODB_DB",
    "MONGODB_URI",
    "PORT",
    "RATE_LIMIT_SECONDS",
    "RATE_LIMIT_SWEEP_SECONDS",
    "RateLimitedError",
    "STORE_TIMEOUT_SECONDS",
    "ScoreboardError",
    "StartupError",
    "StoreError",
    "configure_logging",
    "utcnow",
]
