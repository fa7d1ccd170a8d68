# Copyright (c) 2026 Harsh Dwivedi
# Licensed under the Harsh Non-Commercial Attribution License (HNCAL) v1.0
# Commercial use requires written permission. See LICENSE for details.

"""
YardSort — Global Error Handler
Domain exceptions raised by the sequencing core, plus the handlers that
convert them into structured JSON error responses.
Registered on the FastAPI app in main.py.
"""

from __future__ import annotations

import traceback

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from yardsort.utils.logger import get_logger

log = get_logger(__name__)


class InvalidInputError(ValueError):
    """Raised when a car stream is empty, malformed, or its declared count mismatches."""


class SearchDeadlineExceeded(RuntimeError):
    """Raised when a search runs past the configured deadline."""


def _error_body(code: str, message: str, detail: str | None = None) -> dict:
    body = {"error": {"code": code, "message": message}}
    if detail:
        body["error"]["detail"] = detail
    return body


def register_error_handlers(app: FastAPI) -> None:
    """
    Register all global exception handlers on the FastAPI application.
    Call this in main.py after creating the app instance.
    """

    @app.exception_handler(InvalidInputError)
    async def invalid_input_handler(
        req: Request, exc: InvalidInputError
    ) -> JSONResponse:
        log.warning("invalid_input", path=str(req.url), error=str(exc))
        return JSONResponse(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            content=_error_body(
                code="INVALID_INPUT",
                message=str(exc),
            ),
        )

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(
        req: Request, exc: RequestValidationError
    ) -> JSONResponse:
        # Body-level failures (non-numeric car, empty list) share the
        # INVALID_INPUT shape with errors raised by the sequencing core
        log.warning("invalid_request_body", path=str(req.url), errors=exc.errors())
        return JSONResponse(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            content=_error_body(
                code="INVALID_INPUT",
                message="Request body failed validation.",
                detail=str(exc.errors()),
            ),
        )

    @app.exception_handler(SearchDeadlineExceeded)
    async def deadline_handler(
        req: Request, exc: SearchDeadlineExceeded
    ) -> JSONResponse:
        log.error("search_deadline_exceeded", path=str(req.url), error=str(exc))
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content=_error_body(
                code="SEARCH_DEADLINE_EXCEEDED",
                message="The search did not finish within the configured deadline.",
                detail=str(exc),
            ),
        )

    @app.exception_handler(Exception)
    async def generic_handler(req: Request, exc: Exception) -> JSONResponse:
        tb = traceback.format_exc()
        log.error(
            "unhandled_exception",
            path=str(req.url),
            error=str(exc),
            exc_type=type(exc).__name__,
            traceback=tb,
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=_error_body(
                code="INTERNAL_SERVER_ERROR",
                message="An unexpected error occurred.",
            ),
        )
