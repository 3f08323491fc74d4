from datetime import datetime, timezone
from typing import Any, Dict, List, Mapping, Optional

import attrs


NAME_MAX_LENGTH = 120
EMAIL_MAX_LENGTH = 120
CONTACT_MAX_LENGTH = 60
NOTES_MAX_LENGTH = 500
MAX_INTERESTS = 5


def _text(value: Any, limit: Optional[int] = None) -> str:
    if not value:
        return ''
    text = value if isinstance(value, str) else str(value)
    return text[:limit] if limit is not None else text


@attrs.define(frozen=True)
class JourneyEntry:
    """One audience journey submission, stored as a single JSON line."""

    ts: str
    name: str = ''
    email: str = ''
    contact: str = ''
    role: str = ''
    interests: List[Any] = attrs.Factory(list)
    persona: str = ''
    mood: str = ''
    poll_choice: str = ''
    notes: str = ''

    @classmethod
    def from_submission(
        cls, body: Mapping[str, Any], *, now: Optional[datetime] = None
    ) -> 'JourneyEntry':
        """Build an entry from an untrusted form body, capping every free-text field."""
        submitted_at = now or datetime.now(timezone.utc)
        interests = body.get('interests')
        return cls(
            ts=submitted_at.isoformat(timespec='milliseconds').replace('+00:00', 'Z'),
            name=_text(body.get('name'), NAME_MAX_LENGTH),
            email=_text(body.get('email'), EMAIL_MAX_LENGTH),
            contact=_text(body.get('contact'), CONTACT_MAX_LENGTH),
            role=_text(body.get('role')),
            interests=list(interests[:MAX_INTERESTS]) if isinstance(interests, list) else [],
            persona=_text(body.get('persona')),
            mood=_text(body.get('mood')),
            poll_choice=_text(body.get('pollChoice')),
            notes=_text(body.get('notes'), NOTES_MAX_LENGTH),
        )

    def to_record(self) -> Dict[str, Any]:
        return {
            'ts': self.ts,
            'name': self.name,
            'email': self.email,
            'contact': self.contact,
            'role': self.role,
            'interests': list(self.interests),
            'persona': self.persona,
            'mood': self.mood,
            'pollChoice': self.poll_choice,
            'notes': self.notes,
        }
