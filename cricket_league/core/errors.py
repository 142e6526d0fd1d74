"""Fault taxonomy shared by the services and the HTTP layer."""

from __future__ import annotations


class ScoreboardError(Exception):
    """Base class for faults surfaced to API clients."""

    status_code = 500

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ClientInputError(ScoreboardError):
    """Malformed or invalid submission; the caller should fix the input."""

    status_code = 400


class RateLimitedError(ScoreboardError):
    """The identity submitted again before its cooldown elapsed."""

    status_code = 429


class StoreError(ScoreboardError):
    """The participant store failed or timed out.

    ``message`` is what clients see; the underlying exception is chained.
    """

    status_code = 500


class StartupError(RuntimeError):
    """Missing configuration or an unreachable store at boot."""


__all__ = [
    "ClientInputError",
    "RateLimitedError",
    "ScoreboardError",
    "StartupError",
    "StoreError",
]
