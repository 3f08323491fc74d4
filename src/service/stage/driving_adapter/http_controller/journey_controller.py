from typing import Any, Dict, List

from fastapi import APIRouter, Depends, Request, status
from fastapi.responses import JSONResponse

from src.platform.logging.loguru_io import Logger
from src.service.stage.app.command.clear_journey_log_use_case import ClearJourneyLogUseCase
from src.service.stage.app.command.record_journey_use_case import RecordJourneyUseCase
from src.service.stage.app.query.list_journey_entries_use_case import ListJourneyEntriesUseCase
from src.service.stage.driving_adapter.http_controller.request_body import read_json_object
from src.service.stage.driving_adapter.schema.stage_schema import OkResponse


router = APIRouter()


@router.post('', status_code=status.HTTP_200_OK)
@Logger.io
async def submit_journey(
    request: Request,
    use_case: RecordJourneyUseCase = Depends(RecordJourneyUseCase.depends),
) -> OkResponse:
    body = await read_json_object(request)
    await use_case.record(body=body)
    return OkResponse(ok=True)


@router.get('', status_code=status.HTTP_200_OK)
@Logger.io
async def list_journey(
    use_case: ListJourneyEntriesUseCase = Depends(ListJourneyEntriesUseCase.depends),
) -> List[Dict[str, Any]]:
    return await use_case.list()


@router.post('/clear', status_code=status.HTTP_200_OK)
@Logger.io
async def clear_journey(
    use_case: ClearJourneyLogUseCase = Depends(ClearJourneyLogUseCase.depends),
) -> JSONResponse:
    ok = await use_case.clear()
    return JSONResponse(
        status_code=status.HTTP_200_OK if ok else status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=OkResponse(ok=ok).model_dump(),
    )
