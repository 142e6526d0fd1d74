"""FastAPI dependencies resolving the per-process service instances."""

from __future__ import annotations

from fastapi import Request

from ..services import ScoreboardQuery, ScoreIngest


def get_ingest(request: Request) -> ScoreIngest:
    return request.app.state.ingest


def get_scoreboard(request: Request) -> ScoreboardQuery:
    return request.app.state.scoreboard


__all__ = ["get_ingest", "get_scoreboard"]
