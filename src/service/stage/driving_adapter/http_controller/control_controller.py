from fastapi import APIRouter, Depends, Request, status

from src.platform.logging.loguru_io import Logger
from src.service.stage.app.command.submit_command_use_case import SubmitCommandUseCase
from src.service.stage.driving_adapter.http_controller.request_body import read_json_object
from src.service.stage.driving_adapter.schema.stage_schema import CommandResponse


router = APIRouter()


@router.post('/broadcast', status_code=status.HTTP_200_OK)
@Logger.io
async def broadcast(
    request: Request,
    use_case: SubmitCommandUseCase = Depends(SubmitCommandUseCase.depends),
) -> CommandResponse:
    """Host command: `{type, payload}`. `type == "timeline"` drives the show flow."""
    body = await read_json_object(request)
    action_type = body.get('type')

    payload = use_case.submit(
        action_type=str(action_type) if action_type else None,
        payload=body.get('payload'),
    )
    return CommandResponse(ok=True, state=use_case.session_state.snapshot(), payload=payload)
