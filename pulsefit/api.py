# -*- coding: utf-8 -*-
"""PulseFit HTTP application: routers, CORS and domain error translation."""

from __future__ import annotations

import logging
import os
from datetime import datetime, timezone

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from .app_db import init_app_db
from .config import settings
from .errors import PulseFitError
from .nutrition.api import router as nutrition_router
from .pantry.api import router as pantry_router
from .profiles.api import router as profile_router
from .progress.api import router as progress_router
from .recipes.api import router as recipes_router
from .workouts.api import router as workouts_router

logger = logging.getLogger(__name__)

app = FastAPI(
    title="PulseFit",
    description="Fitness & nutrition personalization: recommendations, progress trends, GPS workout metrics",
    version="1.0.0",
    docs_url="/api/docs",
    redoc_url="/api/redoc",
    openapi_url="/api/openapi.json",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.on_event("startup")
def _startup_init_db() -> None:
    init_app_db(settings.app_db_path)


# Ensure the app DB exists even when lifespan events are not triggered (e.g. some test clients).
init_app_db(settings.app_db_path)


@app.exception_handler(PulseFitError)
async def _domain_error(request: Request, exc: PulseFitError) -> JSONResponse:
    if exc.status_code >= 500:
        logger.error("%s %s failed: %s", request.method, request.url.path, exc.message)
    return JSONResponse(status_code=exc.status_code, content={"detail": exc.message})


app.include_router(profile_router)
app.include_router(workouts_router)
app.include_router(nutrition_router)
app.include_router(recipes_router)
app.include_router(progress_router)
app.include_router(pantry_router)


@app.get("/api/health")
def health_check():
    """健康检查"""
    return {
        "status": "ok",
        "version": app.version,
        "timestamp": datetime.now(timezone.utc).isoformat(),
    }


def run() -> None:
    """Console entry point (used by pyproject [project.scripts])."""
    import uvicorn

    host = os.environ.get("PULSEFIT_HOST") or os.environ.get("HOST") or "127.0.0.1"
    port_raw = os.environ.get("PULSEFIT_PORT") or os.environ.get("PORT") or "8000"
    try:
        port = int(port_raw)
    except ValueError:
        port = 8000

    uvicorn.run("pulsefit.api:app", host=host, port=port, reload=False)
