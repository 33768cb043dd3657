from __future__ import annotations

from contextlib import asynccontextmanager

from fastapi import FastAPI

from cognitive_api.application.services.factories import build_gateways
from cognitive_api.core.config import get_settings
from cognitive_api.core.logging import get_logger

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Build remote service handles on startup.

    Gateways already placed on `app.state` (tests) are left alone.
    """
    settings = getattr(app.state, "settings", None) or get_settings()
    if getattr(app.state, "gateways", None) is None:
        app.state.gateways = build_gateways(settings)
    logger.info(
        "service_startup",
        extra={
            "env": settings.ENV,
            "log_level": settings.LOG_LEVEL,
            "media_dir": str(settings.MEDIA_DIR),
            "handwriting_mock": settings.HANDWRITING_MOCK_ENABLED,
        },
    )
    try:
        yield
    finally:
        logger.info("service_shutdown")
