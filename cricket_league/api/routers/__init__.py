"""Aggregate API routers."""

from fastapi import APIRouter

from .hits import router as hits_router
from .scoreboard import router as scoreboard_router
from .system import router as system_router

ALL_ROUTERS: tuple[APIRouter, ...] = (
    system_router,
    hits_router,
    scoreboard_router,
)

__all__ = ["ALL_ROUTERS"]
