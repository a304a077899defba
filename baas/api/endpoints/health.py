# baas/api/endpoints/health.py
from __future__ import annotations

from fastapi import APIRouter, Request

from baas.schemas.common import HealthOut

router = APIRouter()


@router.get("/health", response_model=HealthOut)
def health_check(request: Request) -> HealthOut:
    settings = request.app.state.settings
    return HealthOut(
        status="healthy",
        service=settings.SERVICE_NAME,
        version=settings.SERVICE_VERSION,
    )
