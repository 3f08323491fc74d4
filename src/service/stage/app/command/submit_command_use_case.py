"""
Submit Command Use Case

Entry point of the host control surface. Routes `timeline` commands to the
scheduler and everything else through the action processor.
"""

from typing import Any, Dict, Mapping, Optional, Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.exception.exceptions import DomainError
from src.platform.logging.loguru_io import Logger
from src.service.stage.app.command.action_processor import ActionProcessor
from src.service.stage.app.command.timeline_scheduler import TimelineScheduler
from src.service.stage.domain.entity.session_state import SessionState
from src.service.stage.domain.enum.action_type import TIMELINE_COMMAND


STOPPED_BY_HOST_LABEL = 'Stopped by host'


class SubmitCommandUseCase:
    def __init__(
        self,
        session_state: SessionState,
        action_processor: ActionProcessor,
        timeline_scheduler: TimelineScheduler,
    ) -> None:
        self.session_state = session_state
        self.action_processor = action_processor
        self.timeline_scheduler = timeline_scheduler

    @classmethod
    @inject
    def depends(
        cls,
        session_state: SessionState = Depends(Provide[Container.session_state]),
        action_processor: ActionProcessor = Depends(Provide[Container.action_processor]),
        timeline_scheduler: TimelineScheduler = Depends(Provide[Container.timeline_scheduler]),
    ) -> Self:
        return cls(
            session_state=session_state,
            action_processor=action_processor,
            timeline_scheduler=timeline_scheduler,
        )

    @Logger.io
    def submit(
        self, *, action_type: Optional[str], payload: Optional[Mapping[str, Any]] = None
    ) -> Dict[str, Any]:
        """
        Apply one host command

        Returns:
            The broadcast payload for regular actions, the timeline status for
            timeline commands

        Raises:
            DomainError: type is missing or empty
        """
        if not action_type:
            raise DomainError('Missing type')

        if action_type == TIMELINE_COMMAND:
            action = payload.get('action') if isinstance(payload, Mapping) else None
            if action == 'start':
                self.timeline_scheduler.start()
            elif action == 'stop':
                self.timeline_scheduler.stop(STOPPED_BY_HOST_LABEL)
            else:
                Logger.base.info(f'⏱️ [TIMELINE] Ignoring timeline action {action!r}')
            return self.session_state.timeline.to_dict()

        return self.action_processor.apply(action_type, payload)
