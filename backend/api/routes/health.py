"""
Liveness and readiness probes.

Both sit outside the subscription gate so load balancers can call them.
"""

import logging
from typing import Optional

from fastapi import APIRouter, Depends, Response, status
from pydantic import BaseModel

from ..dependencies import ServiceContainer, get_container

logger = logging.getLogger(__name__)

router = APIRouter()


class HealthResponse(BaseModel):
    status: str
    version: str


class ReadinessResponse(BaseModel):
    status: str
    storage: str
    detail: Optional[str] = None


@router.get("/health", response_model=HealthResponse)
async def health_check(
    container: ServiceContainer = Depends(get_container),
) -> HealthResponse:
    """Always 200 while the process is serving requests."""
    return HealthResponse(status="healthy", version=container.settings.app_version)


@router.get(
    "/ready",
    response_model=ReadinessResponse,
    response_model_exclude_none=True,
)
async def readiness_check(
    response: Response,
    container: ServiceContainer = Depends(get_container),
) -> ReadinessResponse:
    """
    200 once both repositories can be built for the configured backend.

    A missing Supabase URL or key, or an unknown backend name, makes
    this return 503 with the reason.
    """
    backend = container.settings.storage_backend
    try:
        container.account_repository
        container.item_repository
    except (RuntimeError, ValueError) as e:
        logger.error("Storage backend %s not ready: %s", backend, e)
        response.status_code = status.HTTP_503_SERVICE_UNAVAILABLE
        return ReadinessResponse(status="not_ready", storage=backend, detail=str(e))
    return ReadinessResponse(status="ready", storage=backend)
