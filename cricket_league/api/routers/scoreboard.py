"""Scoreboard endpoint."""

from __future__ import annotations

from typing import List

from fastapi import APIRouter, Depends

from ...models import Participant
from ...services import ScoreboardQuery
from ..dependencies import get_scoreboard

router = APIRouter(tags=["scoreboard"])


@router.get("/scoreboard", response_model=List[Participant])
def get_scoreboard_entries(query: ScoreboardQuery = Depends(get_scoreboard)):
    """Every participant, highest score first."""

    return query.fetch()


__all__ = ["router"]
