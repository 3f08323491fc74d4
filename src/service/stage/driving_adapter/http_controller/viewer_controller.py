from typing import Any, Dict, List

from fastapi import APIRouter, Depends, status
from sse_starlette.sse import EventSourceResponse

from src.platform.config.core_setting import settings
from src.platform.logging.loguru_io import Logger
from src.service.stage.app.query.get_session_state_use_case import GetSessionStateUseCase
from src.service.stage.app.query.stream_viewer_events_use_case import StreamViewerEventsUseCase
from src.service.stage.driving_adapter.schema.stage_schema import PersonaResponse, PresetResponse


router = APIRouter()


@router.get('/events', status_code=status.HTTP_200_OK)
@Logger.io
async def stream_events(
    use_case: StreamViewerEventsUseCase = Depends(StreamViewerEventsUseCase.depends),
) -> EventSourceResponse:
    """SSE push of the session: `init` snapshot first, then one event per broadcast."""
    return EventSourceResponse(
        use_case.stream(),
        ping=settings.SSE_PING_INTERVAL,
        headers={'Cache-Control': 'no-cache'},
    )


@router.get('/state', status_code=status.HTTP_200_OK)
@Logger.io
async def get_state(
    use_case: GetSessionStateUseCase = Depends(GetSessionStateUseCase.depends),
) -> Dict[str, Any]:
    return use_case.snapshot()


@router.get('/presets', status_code=status.HTTP_200_OK)
@Logger.io
async def list_presets(
    use_case: GetSessionStateUseCase = Depends(GetSessionStateUseCase.depends),
) -> List[PresetResponse]:
    return [PresetResponse(**preset) for preset in use_case.presets()]  # type: ignore[arg-type]


@router.get('/personas', status_code=status.HTTP_200_OK)
@Logger.io
async def list_personas(
    use_case: GetSessionStateUseCase = Depends(GetSessionStateUseCase.depends),
) -> List[PersonaResponse]:
    return [PersonaResponse(**persona) for persona in use_case.personas()]
