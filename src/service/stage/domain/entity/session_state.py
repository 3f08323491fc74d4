"""
Session State Entity

The single mutable record of the running presentation. One instance lives for
the whole process and is shared by the action processor, the timeline
scheduler and the journey use cases. It carries no behaviour beyond building
wire-format snapshots (camelCase, deep-copied).
"""

from typing import Any, Dict, List, Optional

import attrs

from src.service.stage.domain.enum.persona import Persona


PollId = int | str


def _empty_persona_counts() -> Dict[Persona, int]:
    return {persona: 0 for persona in Persona}


@attrs.define
class PollOption:
    id: Any
    label: Optional[str]
    count: int = 0

    def to_dict(self) -> Dict[str, Any]:
        return {'id': self.id, 'label': self.label, 'count': self.count}


@attrs.define
class Poll:
    id: PollId
    question: str
    options: List[PollOption]
    ends_at: int  # epoch ms
    answer_text: Optional[str] = None

    def public_view(self) -> Dict[str, Any]:
        """Poll as shown to viewers while it runs, without the answer."""
        return {
            'id': self.id,
            'question': self.question,
            'options': self.option_counts(),
            'endsAt': self.ends_at,
        }

    def option_counts(self) -> List[Dict[str, Any]]:
        return [option.to_dict() for option in self.options]

    def to_dict(self) -> Dict[str, Any]:
        return self.public_view() | {'answerText': self.answer_text}


@attrs.define
class AudienceCounts:
    """Guests only count toward total, there is no guest subtotal."""

    total: int = 0
    students: int = 0
    parents: int = 0

    def to_dict(self) -> Dict[str, int]:
        return {'total': self.total, 'students': self.students, 'parents': self.parents}


@attrs.define
class TimelineStatus:
    active: bool = False
    label: str = 'Idle'

    def to_dict(self) -> Dict[str, Any]:
        return {'active': self.active, 'label': self.label}


@attrs.define
class MediaItem:
    id: str
    title: str = ''
    url: str = ''

    def to_dict(self) -> Dict[str, str]:
        return {'id': self.id, 'title': self.title, 'url': self.url}


@attrs.define
class SessionState:
    scene: str = 'join'
    poll: Optional[Poll] = None
    audience_counts: AudienceCounts = attrs.Factory(AudienceCounts)
    interests: Dict[str, int] = attrs.Factory(dict)
    persona_counts: Dict[Persona, int] = attrs.Factory(_empty_persona_counts)
    timeline: TimelineStatus = attrs.Factory(TimelineStatus)
    last_preset: Optional[str] = None
    journey_count: int = 0
    social_feature: Optional[str] = None
    media: Optional[MediaItem] = None

    def persona_counts_view(self) -> Dict[str, int]:
        return {persona.value: self.persona_counts.get(persona, 0) for persona in Persona}

    def reset_persona_counts(self) -> None:
        self.persona_counts = _empty_persona_counts()

    def snapshot(self) -> Dict[str, Any]:
        """Full state in wire format, sent as the `init` event to new viewers."""
        return {
            'scene': self.scene,
            'poll': self.poll.to_dict() if self.poll else None,
            'audienceCounts': self.audience_counts.to_dict(),
            'interests': dict(self.interests),
            'personaCounts': self.persona_counts_view(),
            'timeline': self.timeline.to_dict(),
            'lastPreset': self.last_preset,
            'journeyCount': self.journey_count,
            'socialFeature': self.social_feature,
            'media': self.media.to_dict() if self.media else None,
        }
