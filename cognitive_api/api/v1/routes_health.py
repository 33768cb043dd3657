from fastapi import APIRouter, Depends, Request

from cognitive_api.core.config import Settings
from cognitive_api.core.dependencies import get_app_settings
from cognitive_api.models.schemas import HealthResponse

router = APIRouter(tags=["health"])


@router.get("/health", response_model=HealthResponse)
async def health(settings: Settings = Depends(get_app_settings)):
    """Liveness check: process is up."""
    return HealthResponse(status="ok", service=settings.APP_NAME)


@router.get("/ready", response_model=HealthResponse)
async def ready(request: Request, settings: Settings = Depends(get_app_settings)):
    """Readiness check: remote service handles have been built."""
    gateways = getattr(request.app.state, "gateways", None)
    if gateways is None:
        return HealthResponse(status="starting", service=settings.APP_NAME)
    return HealthResponse(status="ok", service=settings.APP_NAME)
