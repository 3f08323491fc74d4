"""Stage Domain Enums"""

from src.service.stage.domain.enum.action_type import (
    TIMELINE_COMMAND,
    ActionType,
    ViewerEventType,
)
from src.service.stage.domain.enum.persona import Persona

__all__ = ['TIMELINE_COMMAND', 'ActionType', 'Persona', 'ViewerEventType']
