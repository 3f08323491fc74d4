"""
Action Processor

Turns a host command into a state mutation plus the canonical payload pushed
to viewers. Every command-driven change, including those fired by the
timeline, goes through apply().
"""

import math
import time
from typing import Any, Callable, Dict, Mapping, Optional

from src.platform.logging.loguru_io import Logger
from src.platform.metrics.stage_metrics import metrics
from src.service.stage.app.interface.i_viewer_broadcaster import IViewerBroadcaster
from src.service.stage.domain.entity.session_state import (
    MediaItem,
    Poll,
    PollId,
    PollOption,
    SessionState,
)
from src.service.stage.domain.enum.action_type import ActionType
from src.service.stage.domain.enum.persona import Persona


Payload = Dict[str, Any]


def now_ms() -> int:
    return int(time.time() * 1000)


def _same_option_id(option_id: Any, wanted: Any) -> bool:
    # 1 == True in Python, a vote for True must not hit option 1
    if isinstance(option_id, bool) != isinstance(wanted, bool):
        return False
    return option_id == wanted


# endsAt travels as a signed 64-bit JSON integer
EPOCH_MS_MAX = 2**63 - 1


def _is_duration(value: Any) -> bool:
    if isinstance(value, bool) or not isinstance(value, int | float):
        return False
    return bool(value) and math.isfinite(value)


class ActionProcessor:
    def __init__(
        self,
        *,
        session_state: SessionState,
        broadcaster: IViewerBroadcaster,
        default_poll_duration_ms: int = 15000,
        clock: Callable[[], int] = now_ms,
    ) -> None:
        self.state = session_state
        self.broadcaster = broadcaster
        self.default_poll_duration_ms = default_poll_duration_ms
        self.clock = clock
        self._last_poll_id = 0
        self._handlers: Dict[str, Callable[[Payload], Payload]] = {
            ActionType.SCENE: self._scene,
            ActionType.JOIN: self._join,
            ActionType.POLL_START: self._poll_start,
            ActionType.POLL_VOTE: self._poll_vote,
            ActionType.POLL_STOP: self._poll_stop,
            ActionType.POLL_REVEAL: self._poll_reveal,
            ActionType.MEDIA_PLAY: self._media_play,
            ActionType.MEDIA_STOP: self._media_stop,
            ActionType.SOCIAL_FEATURE: self._social_feature,
            ActionType.OPS_PING: self._ops_ping,
            ActionType.PERSONA: self._persona,
        }

    def apply(self, action_type: str, payload: Optional[Mapping[str, Any]] = None) -> Payload:
        """
        Apply one action and broadcast its outcome

        Args:
            action_type: Action name, also used as the viewer event name
            payload: Command body; None or a non-mapping counts as {}

        Returns:
            The payload that was broadcast

        Note:
            - Unknown types mutate nothing and broadcast the raw payload
            - Exactly one send() per call, before returning
        """
        body: Payload = dict(payload) if isinstance(payload, Mapping) else {}
        handler = self._handlers.get(action_type)
        if handler is None:
            Logger.base.info(f'🔀 [ACTION] Passthrough for unknown type {action_type!r}')
            broadcast_payload = body
        else:
            broadcast_payload = handler(body)

        metrics.record_action(action_type=action_type if handler else 'passthrough')
        self.broadcaster.send(action_type, broadcast_payload)
        return broadcast_payload

    # ========== Handlers ==========

    def _scene(self, payload: Payload) -> Payload:
        if payload.get('scene'):
            self.state.scene = payload['scene']
            Logger.base.info(f'🎬 [ACTION] Scene → {self.state.scene}')
        return payload

    def _join(self, payload: Payload) -> Payload:
        counts = self.state.audience_counts
        role = payload.get('role') or 'guest'
        counts.total += 1
        if role == 'student':
            counts.students += 1
        elif role == 'parent':
            counts.parents += 1

        tags = payload.get('interests')
        for tag in tags if isinstance(tags, list) else []:
            key = str(tag)
            self.state.interests[key] = self.state.interests.get(key, 0) + 1

        return {
            'audienceCounts': counts.to_dict(),
            'interests': dict(self.state.interests),
        }

    def _poll_start(self, payload: Payload) -> Payload:
        raw_options = payload.get('options')
        options = []
        for idx, raw in enumerate(raw_options if isinstance(raw_options, list) else [], 1):
            option = raw if isinstance(raw, Mapping) else {}
            option_id = option.get('id')
            options.append(
                PollOption(
                    id=idx if option_id is None else option_id,
                    label=option.get('label'),
                )
            )

        duration_ms = payload.get('durationMs')
        if not _is_duration(duration_ms):
            duration_ms = self.default_poll_duration_ms

        now = self.clock()
        if not -EPOCH_MS_MAX <= now + duration_ms <= EPOCH_MS_MAX:
            duration_ms = self.default_poll_duration_ms
        self.state.poll = Poll(
            id=payload.get('id') or self._next_poll_id(now),
            question=payload.get('question') or '',
            options=options,
            ends_at=int(now + duration_ms),
            answer_text=payload.get('answerText') or None,
        )
        Logger.base.info(
            f'🗳️ [ACTION] Poll {self.state.poll.id} started '
            f'({len(options)} options, {int(duration_ms)}ms)'
        )
        return self.state.poll.public_view()

    def _next_poll_id(self, now: int) -> PollId:
        self._last_poll_id = max(now, self._last_poll_id + 1)
        return self._last_poll_id

    def _poll_vote(self, payload: Payload) -> Payload:
        poll = self.state.poll
        if poll is None:
            return {}

        option_id = payload.get('optionId')
        if option_id is not None:
            for option in poll.options:
                if _same_option_id(option.id, option_id):
                    option.count += 1
                    break
        return poll.public_view()

    def _poll_stop(self, payload: Payload) -> Payload:
        self.state.poll = None
        return {}

    def _poll_reveal(self, payload: Payload) -> Payload:
        poll = self.state.poll
        answer_text = payload.get('answerText') or (poll.answer_text if poll else None) or ''
        if poll is None:
            return {'answerText': answer_text}
        return {'answerText': answer_text, 'options': poll.option_counts()}

    def _media_play(self, payload: Payload) -> Payload:
        self.state.media = MediaItem(
            id=payload.get('id') or f'media-{self.clock()}',
            title=payload.get('title') or '',
            url=payload.get('url') or '',
        )
        return self.state.media.to_dict()

    def _media_stop(self, payload: Payload) -> Payload:
        self.state.media = None
        return {}

    def _social_feature(self, payload: Payload) -> Payload:
        self.state.social_feature = payload.get('id') or None
        return {'id': self.state.social_feature}

    def _ops_ping(self, payload: Payload) -> Payload:
        return {'note': payload.get('note') or 'Tech check', 'ts': self.clock()}

    def _persona(self, payload: Payload) -> Payload:
        submitted = payload.get('id')
        persona = Persona.parse(submitted)
        if persona is not None:
            self.state.persona_counts[persona] += 1
        return {'personaCounts': self.state.persona_counts_view(), 'id': submitted}
