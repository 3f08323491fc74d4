from typing import Any, Mapping, Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.exception.exceptions import JourneyLogError
from src.platform.logging.loguru_io import Logger
from src.platform.metrics.stage_metrics import metrics
from src.service.stage.app.interface.i_journey_log import IJourneyLog
from src.service.stage.app.interface.i_viewer_broadcaster import IViewerBroadcaster
from src.service.stage.domain.entity.journey_entry import JourneyEntry
from src.service.stage.domain.entity.session_state import SessionState
from src.service.stage.domain.enum.action_type import ViewerEventType


class RecordJourneyUseCase:
    def __init__(
        self,
        session_state: SessionState,
        journey_log: IJourneyLog,
        broadcaster: IViewerBroadcaster,
    ) -> None:
        self.session_state = session_state
        self.journey_log = journey_log
        self.broadcaster = broadcaster

    @classmethod
    @inject
    def depends(
        cls,
        session_state: SessionState = Depends(Provide[Container.session_state]),
        journey_log: IJourneyLog = Depends(Provide[Container.journey_log]),
        broadcaster: IViewerBroadcaster = Depends(Provide[Container.viewer_broadcaster]),
    ) -> Self:
        return cls(session_state=session_state, journey_log=journey_log, broadcaster=broadcaster)

    @Logger.io
    async def record(self, *, body: Mapping[str, Any]) -> JourneyEntry:
        """
        Store a journey submission and bump the live counter

        Note:
            - A failed append is logged, the submission still counts
        """
        entry = JourneyEntry.from_submission(body)
        try:
            await self.journey_log.append(entry)
            metrics.record_journey_submission(stored=True)
        except JourneyLogError as e:
            metrics.record_journey_submission(stored=False)
            Logger.base.error(f'📓 [JOURNEY] Submission not persisted: {e.message}')

        self.session_state.journey_count += 1
        self.broadcaster.send(
            ViewerEventType.JOURNEY_SUMMARY, {'count': self.session_state.journey_count}
        )
        return entry
