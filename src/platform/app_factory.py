"""
Shared FastAPI App Factory

Provides common app setup for production and test environments.
"""

from collections.abc import Callable
from contextlib import AbstractAsyncContextManager
from typing import Any

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import PlainTextResponse
from fastapi.staticfiles import StaticFiles
from prometheus_client import CONTENT_TYPE_LATEST, generate_latest

from src.platform.config.core_setting import settings
from src.platform.exception.exception_handlers import register_exception_handlers
from src.platform.observability.tracing import TracingConfig
from src.service.stage.driving_adapter.http_controller.control_controller import (
    router as control_router,
)
from src.service.stage.driving_adapter.http_controller.journey_controller import (
    router as journey_router,
)
from src.service.stage.driving_adapter.http_controller.page_controller import (
    router as page_router,
)
from src.service.stage.driving_adapter.http_controller.viewer_controller import (
    router as viewer_router,
)


def create_app(
    *,
    lifespan: Callable[[FastAPI], AbstractAsyncContextManager[Any]],
    title_suffix: str = '',
    description: str = 'Live presentation controller',
    service_name: str = settings.OTEL_SERVICE_NAME,
) -> FastAPI:
    """
    Create a configured FastAPI application.

    Args:
        lifespan: Async context manager for app lifespan (startup/shutdown)
        title_suffix: Optional suffix for app title (e.g., " (Test)")
        description: App description
        service_name: Service name for tracing

    Returns:
        Configured FastAPI application
    """
    title = f'{settings.PROJECT_NAME}{title_suffix}'

    app = FastAPI(
        title=title,
        description=description,
        version=settings.VERSION,
        lifespan=lifespan,
    )

    # Auto-instrument FastAPI (must be done before mounting routes)
    tracing_config = TracingConfig(service_name=service_name)
    tracing_config.instrument_fastapi(app=app)

    # Add CORS middleware
    app.add_middleware(
        CORSMiddleware,  # type: ignore
        allow_origins=settings.BACKEND_CORS_ORIGINS,
        allow_credentials=False,
        allow_methods=['*'],
        allow_headers=['*'],
    )

    # Register exception handlers
    register_exception_handlers(app)

    # Include routers
    app.include_router(control_router, tags=['control'])
    app.include_router(viewer_router, tags=['viewer'])
    app.include_router(journey_router, prefix='/journey', tags=['journey'])
    app.include_router(page_router, tags=['page'])

    # Register common endpoints
    _register_common_endpoints(app)

    # Static files (logo and other show assets, then front-end scripts), matched last
    for static_dir in (settings.CONTENT_DIR, settings.PUBLIC_DIR):
        static_dir.mkdir(parents=True, exist_ok=True)
    app.mount('/content', StaticFiles(directory=settings.CONTENT_DIR), name='content')
    app.mount('/', StaticFiles(directory=settings.PUBLIC_DIR), name='public')

    return app


def _register_common_endpoints(app: FastAPI) -> None:
    """Register health and metrics endpoints."""

    @app.get('/health')
    async def health_check() -> dict[str, str]:
        """Health check endpoint for container orchestration."""
        return {'status': 'healthy', 'service': settings.PROJECT_NAME}

    @app.get('/metrics')
    async def get_metrics() -> PlainTextResponse:
        """Prometheus metrics endpoint."""
        return PlainTextResponse(content=generate_latest(), media_type=CONTENT_TYPE_LATEST)
