from typing import Any, Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.logging.loguru_io import Logger
from src.service.stage.app.interface.i_journey_log import IJourneyLog


class ListJourneyEntriesUseCase:
    def __init__(self, journey_log: IJourneyLog) -> None:
        self.journey_log = journey_log

    @classmethod
    @inject
    def depends(cls, journey_log: IJourneyLog = Depends(Provide[Container.journey_log])) -> Self:
        return cls(journey_log=journey_log)

    @Logger.io
    async def list(self) -> list[dict[str, Any]]:
        """
        Raises:
            JourneyLogReadError: the log file could not be read
        """
        return await self.journey_log.list_entries()
