"""Participant record as stored and served on the scoreboard."""

from __future__ import annotations

from datetime import datetime
from typing import Any, Mapping

from pydantic import BaseModel, ConfigDict, Field


class Participant(BaseModel):
    """One row of the scoreboard, keyed uniquely by roll number."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    roll_number: str = Field(alias="rollNumber")
    name: str = ""
    score: int = 0
    last_played: datetime = Field(alias="lastPlayed")

    @classmethod
    def from_document(cls, doc: Mapping[str, Any]) -> "Participant":
        """Build a participant from a raw store document (``_id`` ignored)."""

        return cls(
            roll_number=doc["rollNumber"],
            name=doc.get("name", ""),
            score=doc.get("score", 0),
            last_played=doc["lastPlayed"],
        )


__all__ = ["Participant"]
