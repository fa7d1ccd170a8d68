# Copyright (c) 2026 Harsh Dwivedi
# Licensed under the Harsh Non-Commercial Attribution License (HNCAL) v1.0
# Commercial use requires written permission. See LICENSE for details.

"""
YardSort — FastAPI Application Entry Point
Creates the app, registers lifespan events, routers,
and global error handlers.
"""

from __future__ import annotations

from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI

from yardsort.api.middleware.error_handler import register_error_handlers
from yardsort.api.routes import sort
from yardsort.config import get_settings
from yardsort.utils.logger import configure_logging, get_logger

log = get_logger(__name__)

VERSION = "1.0.0"


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan manager.
    Startup: configure logging and report the active search limits.
    """
    # ── Startup ──────────────────────────────────────────────────────────────
    settings = get_settings()
    configure_logging(settings.log_level)

    log.info(
        "yardsort_startup",
        version=VERSION,
        max_cars=settings.max_cars,
        search_deadline_s=settings.search_deadline_seconds,
        log_level=settings.log_level,
    )
    yield

    # ── Shutdown ─────────────────────────────────────────────────────────────
    log.info("yardsort_shutdown")


def create_app() -> FastAPI:
    settings = get_settings()

    app = FastAPI(
        title="YardSort",
        summary="Branch-and-bound railway yard sequencer.",
        version=VERSION,
        docs_url="/docs",
        redoc_url="/redoc",
        lifespan=lifespan,
    )

    # ── Error Handlers ───────────────────────────────────────────────────────
    register_error_handlers(app)

    # ── Routers ──────────────────────────────────────────────────────────────
    app.include_router(sort.router)

    # ── Health Check ─────────────────────────────────────────────────────────
    @app.get("/health", tags=["health"], summary="Health check")
    async def health() -> dict:
        return {
            "status": "ok",
            "service": "yardsort",
            "version": VERSION,
            "max_cars": settings.max_cars,
            "search_deadline_s": settings.search_deadline_seconds,
        }

    return app


# Module-level app instance for uvicorn
app = create_app()


def run() -> None:
    """Console entry point: serve the module-level app with uvicorn."""
    settings = get_settings()
    uvicorn.run(
        "yardsort.main:app",
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )
