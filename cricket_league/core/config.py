"""Application settings and environment helpers."""

from __future__ import annotations

import os

from dotenv import load_dotenv

from .errors import StartupError

load_dotenv(override=False)


def _require_env(name: str) -> str:
    """Return a required environment variable or abort start-up."""

    value = os.getenv(name)
    if not value:
        raise StartupError(f"Missing required environment variable: {name}")
    return value


def _env_float(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return float(raw)
    except ValueError as exc:
        raise StartupError(f"{name} must be a number") from exc


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw)
    except ValueError as exc:
        raise StartupError(f"{name} must be an integer") from exc


# Store ----------------------------------------------------------------------
MONGODB_URI = _require_env("MONGODB_URI")
MONGODB_DB = os.getenv("MONGODB_DB", "cricket_db")
MONGODB_COLLECTION = os.getenv("MONGODB_COLLECTION", "students_performance")

CONNECT_TIMEOUT_SECONDS = _env_float("CONNECT_TIMEOUT_SECONDS", 10.0)
STORE_TIMEOUT_SECONDS = _env_float("STORE_TIMEOUT_SECONDS", 5.0)


# Throttling and caching -----------------------------------------------------
RATE_LIMIT_SECONDS = _env_float("RATE_LIMIT_SECONDS", 2.0)
CACHE_TTL_SECONDS = _env_float("CACHE_TTL_SECONDS", 2.0)
# Periodic pruning of expired rate-limit entries; 0 keeps every entry.
RATE_LIMIT_SWEEP_SECONDS = _env_float("RATE_LIMIT_SWEEP_SECONDS", 0.0)


# Runtime behaviour ----------------------------------------------------------
HOST = os.getenv("HOST", "0.0.0.0")
PORT = _env_int("PORT", 9000)
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()


__all__ = [
    "CACHE_TTL_SECONDS",
    "CONNECT_TIMEOUT_SECONDS",
    "HOST",
    "LOG_LEVEL",
    "MONGODB_COLLECTION",
    "MONGODB_DB",
    "MONGODB_URI",
    "PORT",
    "RATE_LIMIT_SECONDS",
    "RATE_LIMIT_SWEEP_SECONDS",
    "STORE_TIMEOUT_SECONDS",
]
