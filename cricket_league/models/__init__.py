"""API and store model exports."""

from .hit import HitRequest
from .participant import Participant

__all__ = [
    "HitRequest",
    "Participant",
]
