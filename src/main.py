"""
Production FastAPI Application

Single-process live presentation controller: host commands, viewer SSE
fan-out, the scripted show timeline and the journey submission log.

Run with exactly one worker, session state lives in this process:
    granian src.main:app --interface asgi --workers 1
"""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI

from src.platform.app_factory import create_app
from src.platform.config.core_setting import settings
from src.platform.config.di import container
from src.platform.config.wire_modules import WIRE_MODULES
from src.platform.logging.loguru_io import Logger
from src.platform.observability.tracing import TracingConfig


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Manage application lifespan: startup and shutdown."""
    Logger.base.info('🚀 [Stage Service] Starting up...')

    # Setup OpenTelemetry tracing (OTLP only when an endpoint is configured)
    tracing = TracingConfig(service_name=settings.OTEL_SERVICE_NAME)
    tracing.setup()
    Logger.base.info('📊 [Stage Service] OpenTelemetry tracing configured')

    # Wire dependency injection for all modules
    container.wire(modules=WIRE_MODULES)
    Logger.base.info('🔌 [Stage Service] Dependency injection wired')

    # Journey log must exist before the first submission; seed the live counter from it
    journey_log = container.journey_log()
    await journey_log.ensure_exists()
    session_state = container.session_state()
    session_state.journey_count = await journey_log.count_entries()
    Logger.base.info(
        f'📓 [Stage Service] Journey log ready ({session_state.journey_count} submissions)'
    )

    Logger.base.info('✅ [Stage Service] Ready to serve requests')

    yield

    Logger.base.info('🛑 [Stage Service] Shutting down...')

    # Pending show cues would otherwise fire into a closed loop
    container.timeline_scheduler().shutdown()
    Logger.base.info('⏱️ [Stage Service] Timeline cancelled')

    # Shutdown tracing (flush remaining spans)
    tracing.shutdown()
    Logger.base.info('📊 [Stage Service] Tracing shutdown complete')

    # Unwire DI
    container.unwire()

    Logger.base.info('👋 [Stage Service] Shutdown complete')


# Create FastAPI app using shared factory
app = create_app(lifespan=lifespan)
