"""
Health check endpoints.

Provides endpoints for monitoring application health and readiness.
"""

import logging

from fastapi import APIRouter, Response
from pydantic import BaseModel

from shared.config import get_settings
from ..dependencies import get_container

logger = logging.getLogger(__name__)

router = APIRouter()


class HealthResponse(BaseModel):
    """Health check response model."""

    status: str
    version: str


class ReadinessResponse(BaseModel):
    """Readiness check response model."""

    status: str
    database: str
    auth_client: str


@router.get("/health", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    """
    Basic health check endpoint.

    Returns 200 if the API is running.
    """
    return HealthResponse(status="healthy", version=get_settings().app_version)


@router.get("/ready", response_model=ReadinessResponse)
async def readiness_check(response: Response) -> ReadinessResponse:
    """
    Readiness check endpoint.

    Runs a head-only count against artworks and reports whether the shared
    auth client has been built. Answers 503 when the database is unreachable.
    """
    container = get_container()

    database = "connected"
    try:
        container.db.table("artworks").select("id", count="exact", head=True).execute()
    except Exception as e:
        logger.warning("Readiness check failed: %s", e)
        database = "unavailable"

    auth_client = "initialized" if container.auth_clients.is_initialized else "not initialized"

    if database != "connected":
        response.status_code = 503
        return ReadinessResponse(status="not ready", database=database, auth_client=auth_client)

    return ReadinessResponse(status="ready", database=database, auth_client=auth_client)
