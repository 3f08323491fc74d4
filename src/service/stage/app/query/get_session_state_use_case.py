from typing import Any, Dict, List, Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.service.stage.app.command.poll_preset_library import PollPresetLibrary
from src.service.stage.domain.entity.session_state import SessionState
from src.service.stage.domain.enum.persona import Persona


class GetSessionStateUseCase:
    """Read-only views of the live session and its catalogues."""

    def __init__(self, session_state: SessionState, preset_library: PollPresetLibrary) -> None:
        self.session_state = session_state
        self.preset_library = preset_library

    @classmethod
    @inject
    def depends(
        cls,
        session_state: SessionState = Depends(Provide[Container.session_state]),
        preset_library: PollPresetLibrary = Depends(Provide[Container.poll_preset_library]),
    ) -> Self:
        return cls(session_state=session_state, preset_library=preset_library)

    def snapshot(self) -> Dict[str, Any]:
        return self.session_state.snapshot()

    def presets(self) -> List[Dict[str, object]]:
        return self.preset_library.catalogue()

    def personas(self) -> List[Dict[str, str]]:
        return [
            {'id': persona.value, 'label': persona.label, 'description': persona.description}
            for persona in Persona
        ]
