"""
Timeline Scheduler

Drives the scripted show flow: a fixed list of cues, each fired at an offset
from start(). Cues are asyncio tasks sleeping until their offset.

Cancellation is two-layered:
- start()/stop() bump the generation and cancel every pending task
- A cue that still wakes up checks its generation and timeline.active first
"""

import asyncio
from typing import List, Set

from opentelemetry import trace

from src.platform.logging.loguru_io import Logger
from src.platform.metrics.stage_metrics import metrics
from src.service.stage.app.command.action_processor import ActionProcessor
from src.service.stage.app.command.poll_preset_library import PollPresetLibrary
from src.service.stage.app.interface.i_viewer_broadcaster import IViewerBroadcaster
from src.service.stage.domain.entity.session_state import SessionState, TimelineStatus
from src.service.stage.domain.enum.action_type import ActionType, ViewerEventType
from src.service.stage.domain.value_object.timeline_step import TimelineStep


PREPARING_LABEL = 'Preparing flow'
PAUSED_LABEL = 'Paused'
FLOW_COMPLETE_LABEL = 'Flow complete - ready for Q&A'


class TimelineScheduler:
    def __init__(
        self,
        *,
        session_state: SessionState,
        action_processor: ActionProcessor,
        preset_library: PollPresetLibrary,
        broadcaster: IViewerBroadcaster,
        time_scale: float = 1.0,
    ) -> None:
        self.state = session_state
        self.action_processor = action_processor
        self.preset_library = preset_library
        self.broadcaster = broadcaster
        self.time_scale = time_scale
        self.tracer = trace.get_tracer(__name__)
        self._generation = 0
        self._tasks: Set[asyncio.Task[None]] = set()

    @property
    def generation(self) -> int:
        return self._generation

    @property
    def pending_steps(self) -> int:
        return len(self._tasks)

    def build_sequence(self) -> List[TimelineStep]:
        scene = self._scene_cue
        return [
            TimelineStep(0, 'Welcome & profile the room', scene('join')),
            TimelineStep(15000, 'Feelings pulse - what matters most?', scene('pulse')),
            TimelineStep(
                32000, 'Persona prompt - how do you respond to challenge?', scene('persona')
            ),
            TimelineStep(50000, 'Choose your Beatty track', scene('tracks')),
            TimelineStep(65000, 'Opportunities matched to you', scene('recommend')),
            TimelineStep(80000, 'Social proof - Beatty in action', scene('social')),
            TimelineStep(
                95000,
                'Poll - 1st or 2nd choice CCA?',
                lambda: self.preset_library.start_preset('cca'),
            ),
            TimelineStep(
                120000,
                'Reveal - 90% get their top CCAs',
                lambda: self.action_processor.apply(ActionType.POLL_REVEAL, {}),
            ),
            TimelineStep(126000, 'Celebrate & spotlight journeys', self._celebrate),
            TimelineStep(140000, FLOW_COMPLETE_LABEL, lambda: self.stop(FLOW_COMPLETE_LABEL)),
        ]

    def start(self) -> None:
        """
        (Re)start the show flow from the top

        Note:
            - Any run in progress is cancelled first
            - Resets scene, poll, preset, personas, social item and media
        """
        self._cancel_pending()
        self._reset_for_flow()

        sequence = self.build_sequence()
        self._set_status(active=False, label=PREPARING_LABEL)
        self._set_status(active=True, label=sequence[0].label)

        generation = self._generation
        for step in sequence:
            task = asyncio.create_task(self._run_step(step, generation))
            self._tasks.add(task)
            task.add_done_callback(self._tasks.discard)

        Logger.base.info(
            f'⏱️ [TIMELINE] Flow started (generation={generation}, steps={len(sequence)}, '
            f'time_scale={self.time_scale})'
        )

    def stop(self, label: str = PAUSED_LABEL) -> None:
        self._cancel_pending()
        self._set_status(active=False, label=label)
        Logger.base.info(f'⏱️ [TIMELINE] Flow stopped: {label}')

    def shutdown(self) -> None:
        """Cancel pending cues without touching state or viewers (app shutdown)"""
        self._cancel_pending()

    # ========== Internals ==========

    def _cancel_pending(self) -> None:
        self._generation += 1
        current = asyncio.current_task() if self._tasks else None
        for task in list(self._tasks):
            if task is not current:
                task.cancel()
        self._tasks.clear()

    def _reset_for_flow(self) -> None:
        self.state.scene = 'join'
        self.state.poll = None
        self.state.last_preset = None
        self.state.reset_persona_counts()
        self.state.social_feature = None
        self.state.media = None

        self.broadcaster.send(
            ActionType.PERSONA, {'personaCounts': self.state.persona_counts_view()}
        )
        self.broadcaster.send(ActionType.POLL_STOP, {})
        self.broadcaster.send(ActionType.MEDIA_STOP, {})
        self.broadcaster.send(ActionType.SOCIAL_FEATURE, {'id': None})

    def _set_status(self, *, active: bool, label: str) -> None:
        self.state.timeline = TimelineStatus(active=active, label=label)
        self.broadcaster.send(ViewerEventType.TIMELINE_STATUS, self.state.timeline.to_dict())

    def _scene_cue(self, scene: str):
        return lambda: self.action_processor.apply(ActionType.SCENE, {'scene': scene})

    def _celebrate(self) -> None:
        self.action_processor.apply(ActionType.POLL_STOP, {})
        self.action_processor.apply(ActionType.SCENE, {'scene': 'finale'})

    async def _run_step(self, step: TimelineStep, generation: int) -> None:
        await asyncio.sleep(step.offset_ms / 1000 * self.time_scale)
        self._fire(step, generation)

    def _fire(self, step: TimelineStep, generation: int) -> None:
        if generation != self._generation or not self.state.timeline.active:
            Logger.base.debug(f'⏱️ [TIMELINE] Skipping stale step {step.label!r}')
            return

        with self.tracer.start_as_current_span(
            'timeline.step',
            attributes={
                'timeline.generation': generation,
                'timeline.offset_ms': step.offset_ms,
                'timeline.label': step.label,
            },
        ):
            self._set_status(active=True, label=step.label)
            try:
                step.action()
            except Exception as e:
                Logger.base.exception(f'❌ [TIMELINE] Step {step.label!r} failed: {e}')

        metrics.record_timeline_step()
        Logger.base.info(f'⏱️ [TIMELINE] Fired +{step.offset_ms}ms: {step.label}')
