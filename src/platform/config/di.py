"""
https://python-dependency-injector.ets-labs.org/index.html
https://python-dependency-injector.ets-labs.org/examples/fastapi.html
"""

from dependency_injector import containers, providers

from src.platform.config.core_setting import Settings
from src.service.stage.app.command.action_processor import ActionProcessor
from src.service.stage.app.command.poll_preset_library import PollPresetLibrary
from src.service.stage.app.command.timeline_scheduler import TimelineScheduler
from src.service.stage.domain.entity.session_state import SessionState
from src.service.stage.driven_adapter.broadcaster.viewer_broadcaster_impl import (
    ViewerBroadcasterImpl,
)
from src.service.stage.driven_adapter.journey.jsonl_journey_log_impl import JsonlJourneyLogImpl


class Container(containers.DeclarativeContainer):
    # Configuration
    config_service = providers.Singleton(Settings)

    # The one live session of this process (single worker only)
    session_state = providers.Singleton(SessionState)

    # Viewer fan-out (in-memory, one bounded stream per /events connection)
    viewer_broadcaster = providers.Singleton(
        ViewerBroadcasterImpl,
        session_state=session_state,
        buffer_size=config_service.provided.VIEWER_STREAM_BUFFER_SIZE,
    )

    # Journey submissions (JSON Lines file)
    journey_log = providers.Singleton(
        JsonlJourneyLogImpl,
        file_path=config_service.provided.JOURNEY_FILE,
    )

    # Show engine
    action_processor = providers.Singleton(
        ActionProcessor,
        session_state=session_state,
        broadcaster=viewer_broadcaster,
        default_poll_duration_ms=config_service.provided.DEFAULT_POLL_DURATION_MS,
    )
    poll_preset_library = providers.Singleton(
        PollPresetLibrary,
        action_processor=action_processor,
        preset_duration_ms=config_service.provided.PRESET_POLL_DURATION_MS,
    )
    timeline_scheduler = providers.Singleton(
        TimelineScheduler,
        session_state=session_state,
        action_processor=action_processor,
        preset_library=poll_preset_library,
        broadcaster=viewer_broadcaster,
        time_scale=config_service.provided.TIMELINE_TIME_SCALE,
    )


container = Container()
