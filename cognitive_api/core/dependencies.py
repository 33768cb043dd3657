"""FastAPI dependency functions resolving settings and remote handles."""

from __future__ import annotations

from fastapi import Depends, HTTPException, Request, status

from cognitive_api.application.services.factories import Gateways, build_poller
from cognitive_api.core.config import Settings, get_settings
from cognitive_api.domain.lro.poller import LroPoller


def get_app_settings(request: Request) -> Settings:
    """Settings the app was created with (falls back to the environment)."""
    return getattr(request.app.state, "settings", None) or get_settings()


async def get_gateways(request: Request) -> Gateways:
    """Get the remote service handles from app state.

    Raises:
        HTTPException: 503 if the lifespan has not populated them
    """
    gateways = getattr(request.app.state, "gateways", None)
    if gateways is None:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Remote services unavailable",
        )
    return gateways


def get_summary_poller(settings: Settings = Depends(get_app_settings)) -> LroPoller:
    return build_poller(settings, "summarize")


def get_read_poller(settings: Settings = Depends(get_app_settings)) -> LroPoller:
    return build_poller(settings, "ocr")
