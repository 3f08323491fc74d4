from typing import Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.exception.exceptions import JourneyLogError
from src.platform.logging.loguru_io import Logger
from src.service.stage.app.interface.i_journey_log import IJourneyLog
from src.service.stage.app.interface.i_viewer_broadcaster import IViewerBroadcaster
from src.service.stage.domain.entity.session_state import SessionState
from src.service.stage.domain.enum.action_type import ViewerEventType


class ClearJourneyLogUseCase:
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
    async def clear(self) -> bool:
        """Truncate the log and reset the counter; False (and no broadcast) on failure"""
        try:
            await self.journey_log.clear()
        except JourneyLogError as e:
            Logger.base.error(f'📓 [JOURNEY] Clear failed: {e.message}')
            return False

        self.session_state.journey_count = 0
        self.broadcaster.send(ViewerEventType.JOURNEY_SUMMARY, {'count': 0})
        return True
