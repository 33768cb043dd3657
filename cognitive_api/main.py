"""FastAPI application entry point."""

from __future__ import annotations

from dotenv import load_dotenv

load_dotenv()

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles

from cognitive_api.api.v1.routes_catalog import router as catalog_router
from cognitive_api.api.v1.routes_health import router as health_router
from cognitive_api.api.v1.routes_language import router as language_router
from cognitive_api.api.v1.routes_speech import router as speech_router
from cognitive_api.api.v1.routes_vision import router as vision_router
from cognitive_api.core.config import Settings, get_settings
from cognitive_api.core.error_handlers import register_error_handlers
from cognitive_api.core.lifespan import lifespan
from cognitive_api.core.logging import RequestIdMiddleware, configure_logging
from cognitive_api.observability.metrics import MetricsMiddleware
from cognitive_api.observability.metrics import router as metrics_router


def create_app(settings: Settings | None = None) -> FastAPI:
    settings = settings or get_settings()
    configure_logging(settings.LOG_LEVEL, json_format=settings.LOG_JSON)

    app = FastAPI(
        title=settings.APP_NAME,
        version="1.0.0",
        description="Azure Cognitive Services behind one JSON API",
        lifespan=lifespan,
    )
    app.state.settings = settings

    # Middlewares
    app.add_middleware(RequestIdMiddleware)
    app.add_middleware(MetricsMiddleware)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_methods=["*"],
        allow_headers=["*"],
        expose_headers=["X-Request-ID"],
    )

    register_error_handlers(app)

    # Routers
    app.include_router(health_router)
    app.include_router(metrics_router)
    for router in (language_router, vision_router, speech_router, catalog_router):
        app.include_router(router, prefix=settings.API_PREFIX)

    # Generated media
    settings.MEDIA_DIR.mkdir(parents=True, exist_ok=True)
    app.mount(settings.MEDIA_URL_PATH, StaticFiles(directory=settings.MEDIA_DIR), name="media")
    return app


app = create_app()


def run() -> None:
    import uvicorn

    settings = get_settings()
    uvicorn.run("cognitive_api.main:app", host=settings.HOST, port=settings.PORT)
