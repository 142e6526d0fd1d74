"""Translate service faults into HTTP responses."""

from __future__ import annotations

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse, PlainTextResponse

from ..core.errors import ClientInputError, RateLimitedError, StoreError

logger = logging.getLogger(__name__)


async def _invalid_body(request: Request, exc: RequestValidationError) -> PlainTextResponse:
    logger.info("Rejected unparsable body on %s: %s", request.url.path, exc.errors())
    return PlainTextResponse("Invalid input", status_code=400)


async def _client_fault(request: Request, exc: ClientInputError) -> JSONResponse:
    logger.info("Rejected %s: %s", request.url.path, exc.message)
    return JSONResponse({"error": exc.message}, status_code=exc.status_code)


async def _rate_limited(request: Request, exc: RateLimitedError) -> JSONResponse:
    return JSONResponse({"error": exc.message}, status_code=exc.status_code)


async def _store_fault(request: Request, exc: StoreError) -> PlainTextResponse:
    # Clients only see the terse message; the driver error goes to the log.
    logger.error("Store failure on %s: %s", request.url.path, exc.message, exc_info=exc)
    return PlainTextResponse(exc.message, status_code=exc.status_code)


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(RequestValidationError, _invalid_body)
    app.add_exception_handler(ClientInputError, _client_fault)
    app.add_exception_handler(RateLimitedError, _rate_limited)
    app.add_exception_handler(StoreError, _store_fault)


__all__ = ["register_error_handlers"]
