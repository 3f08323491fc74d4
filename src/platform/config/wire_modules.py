"""
Wire Modules Configuration

Defines the modules that need dependency injection wiring.
Shared between production and test environments.
"""

from types import ModuleType

from src.service.stage.app.command import (
    clear_journey_log_use_case,
    record_journey_use_case,
    submit_command_use_case,
)
from src.service.stage.app.query import (
    get_session_state_use_case,
    list_journey_entries_use_case,
    stream_viewer_events_use_case,
)


WIRE_MODULES: list[ModuleType] = [
    submit_command_use_case,
    record_journey_use_case,
    clear_journey_log_use_case,
    get_session_state_use_case,
    list_journey_entries_use_case,
    stream_viewer_events_use_case,
]
