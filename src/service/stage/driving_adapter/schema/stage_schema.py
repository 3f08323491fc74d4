from typing import Any, Dict, List

from pydantic import BaseModel


class CommandResponse(BaseModel):
    ok: bool = True
    state: Dict[str, Any]
    payload: Dict[str, Any]

    class Config:
        json_schema_extra = {
            'example': {
                'ok': True,
                'state': {
                    'scene': 'poll',
                    'poll': {
                        'id': 1718000000000,
                        'question': 'Which track?',
                        'options': [{'id': 1, 'label': 'Arts', 'count': 0}],
                        'endsAt': 1718000015000,
                        'answerText': None,
                    },
                    'audienceCounts': {'total': 0, 'students': 0, 'parents': 0},
                    'interests': {},
                    'personaCounts': {
                        'explorer': 0,
                        'creator': 0,
                        'guardian': 0,
                        'trailblazer': 0,
                    },
                    'timeline': {'active': False, 'label': 'Idle'},
                    'lastPreset': None,
                    'journeyCount': 0,
                    'socialFeature': None,
                    'media': None,
                },
                'payload': {
                    'id': 1718000000000,
                    'question': 'Which track?',
                    'options': [{'id': 1, 'label': 'Arts', 'count': 0}],
                    'endsAt': 1718000015000,
                },
            }
        }


class PresetResponse(BaseModel):
    key: str
    question: str
    options: List[str]


class PersonaResponse(BaseModel):
    id: str
    label: str
    description: str


class OkResponse(BaseModel):
    ok: bool
