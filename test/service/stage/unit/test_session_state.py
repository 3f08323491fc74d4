import pytest

from src.service.stage.domain.entity.session_state import (
    MediaItem,
    Poll,
    PollOption,
    SessionState,
)
from src.service.stage.domain.enum.persona import Persona


@pytest.mark.unit
class TestSessionState:
    def test_defaults(self):
        assert SessionState().snapshot() == {
            'scene': 'join',
            'poll': None,
            'audienceCounts': {'total': 0, 'students': 0, 'parents': 0},
            'interests': {},
            'personaCounts': {'explorer': 0, 'creator': 0, 'guardian': 0, 'trailblazer': 0},
            'timeline': {'active': False, 'label': 'Idle'},
            'lastPreset': None,
            'journeyCount': 0,
            'socialFeature': None,
            'media': None,
        }

    def test_snapshot_is_a_deep_copy(self):
        state = SessionState(
            poll=Poll(id=1, question='Q', options=[PollOption(id=1, label='A')], ends_at=5),
            media=MediaItem(id='vid'),
        )
        state.interests['arts'] = 1

        snapshot = state.snapshot()
        snapshot['poll']['options'][0]['count'] = 99
        snapshot['interests']['arts'] = 99
        snapshot['personaCounts']['explorer'] = 99
        snapshot['media']['title'] = 'changed'

        assert state.poll.options[0].count == 0
        assert state.interests == {'arts': 1}
        assert state.persona_counts[Persona.EXPLORER] == 0
        assert state.media.title == ''

    def test_snapshot_includes_answer_text(self):
        state = SessionState(
            poll=Poll(id=1, question='Q', options=[], ends_at=5, answer_text='Correct: A')
        )

        assert state.snapshot()['poll'] == {
            'id': 1,
            'question': 'Q',
            'options': [],
            'endsAt': 5,
            'answerText': 'Correct: A',
        }

    def test_persona_parse(self):
        assert Persona.parse('creator') is Persona.CREATOR
        assert Persona.parse('bogus') is None
        assert Persona.parse(None) is None
        assert Persona.TRAILBLAZER.label == 'Trailblazer'
