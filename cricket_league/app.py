"""FastAPI application factory and configuration."""

from __future__ import annotations

import asyncio
import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request
from pymongo import MongoClient
from starlette.responses import Response

from . import __version__
from .api import register_error_handlers, register_routes
from .core import (
    CACHE_TTL_SECONDS,
    HOST,
    PORT,
    RATE_LIMIT_SECONDS,
    RATE_LIMIT_SWEEP_SECONDS,
    STORE_TIMEOUT_SECONDS,
    configure_logging,
)
from .core.database import connect
from .services import (
    MongoParticipantStore,
    ParticipantStore,
    RateLimiter,
    ScoreboardCache,
    ScoreboardQuery,
    ScoreIngest,
)

logger = logging.getLogger(__name__)

CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Methods": "GET, POST, PUT, DELETE, OPTIONS",
    "Access-Control-Allow-Headers": "*",
}


async def cors_middleware(request: Request, call_next):
    """Allow any origin; answer every OPTIONS request with an empty 200."""

    if request.method == "OPTIONS":
        return Response(status_code=200, headers=CORS_HEADERS)

    response = await call_next(request)
    response.headers.update(CORS_HEADERS)
    return response


async def _sweep_rate_limits(limiter: RateLimiter, interval: float) -> None:
    while True:
        await asyncio.sleep(interval)
        dropped = await asyncio.to_thread(limiter.sweep)
        if dropped:
            logger.debug("Swept %d expired rate-limit entries", dropped)


def _open_mongo_store() -> tuple[MongoClient, MongoParticipantStore]:
    client, collection = connect()
    store = MongoParticipantStore(collection, timeout=STORE_TIMEOUT_SECONDS)
    store.ensure_indexes()
    return client, store


def _wire_services(app: FastAPI, store: ParticipantStore) -> None:
    app.state.store = store
    app.state.ingest = ScoreIngest(store, app.state.rate_limiter)
    app.state.scoreboard = ScoreboardQuery(store, app.state.scoreboard_cache)


@asynccontextmanager
async def lifespan(app: FastAPI):
    client = None
    if getattr(app.state, "store", None) is None:
        client, store = _open_mongo_store()
        _wire_services(app, store)

    sweeper: Optional[asyncio.Task] = None
    if app.state.sweep_interval > 0:
        sweeper = asyncio.create_task(
            _sweep_rate_limits(app.state.rate_limiter, app.state.sweep_interval)
        )

    logger.info("Cricket Battle League API ready")
    try:
        yield
    finally:
        if sweeper is not None:
            sweeper.cancel()
            try:
                await sweeper
            except asyncio.CancelledError:
                pass
        if client is not None:
            client.close()


def create_app(
    store: Optional[ParticipantStore] = None,
    rate_limiter: Optional[RateLimiter] = None,
    scoreboard_cache: Optional[ScoreboardCache] = None,
    sweep_interval: float = RATE_LIMIT_SWEEP_SECONDS,
) -> FastAPI:
    """Build the app; without ``store`` MongoDB is connected during start-up."""

    configure_logging()

    app = FastAPI(title="Cricket Battle League API", version=__version__, lifespan=lifespan)
    app.middleware("http")(cors_middleware)

    if rate_limiter is None:
        rate_limiter = RateLimiter(RATE_LIMIT_SECONDS)
    if scoreboard_cache is None:
        scoreboard_cache = ScoreboardCache(CACHE_TTL_SECONDS)

    app.state.rate_limiter = rate_limiter
    app.state.scoreboard_cache = scoreboard_cache
    app.state.sweep_interval = sweep_interval
    app.state.store = None
    if store is not None:
        _wire_services(app, store)

    register_error_handlers(app)
    register_routes(app)
    return app


def main() -> None:
    import uvicorn

    app = create_app()
    logger.info("Cricket Battle League API running on port %s...", PORT)
    uvicorn.run(app, host=HOST, port=PORT)


if __name__ == "__main__":
    main()
