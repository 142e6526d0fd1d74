"""Scoring event endpoint."""

from __future__ import annotations

from typing import Dict

from fastapi import APIRouter, Depends

from ...models import HitRequest
from ...services import ScoreIngest
from ..dependencies import get_ingest

router = APIRouter(tags=["hits"])


@router.post("/hit")
def hit_shot(body: HitRequest, ingest: ScoreIngest = Depends(get_ingest)) -> Dict[str, str]:
    """Add a shot to a participant's cumulative score."""

    ingest.submit(body.roll_number, body.name, body.shot)
    return {"message": "Shot recorded successfully"}


__all__ = ["router"]
