from datetime import datetime, timezone

import pytest

from src.service.stage.domain.entity.journey_entry import JourneyEntry


@pytest.mark.unit
class TestJourneyEntry:
    def test_caps_free_text_fields(self):
        entry = JourneyEntry.from_submission(
            {
                'name': 'n' * 200,
                'email': 'e' * 200,
                'contact': 'c' * 100,
                'notes': 'x' * 900,
                'interests': ['a', 'b', 'c', 'd', 'e', 'f', 'g'],
            }
        )

        assert len(entry.name) == 120
        assert len(entry.email) == 120
        assert len(entry.contact) == 60
        assert len(entry.notes) == 500
        assert entry.interests == ['a', 'b', 'c', 'd', 'e']

    def test_missing_values_become_empty(self):
        record = JourneyEntry.from_submission({}).to_record()

        assert set(record) == {
            'ts', 'name', 'email', 'contact', 'role', 'interests',
            'persona', 'mood', 'pollChoice', 'notes',
        }
        assert record['interests'] == []
        assert all(record[key] == '' for key in record if key not in ('ts', 'interests'))

    def test_non_list_interests(self):
        assert JourneyEntry.from_submission({'interests': 'robotics'}).interests == []

    def test_timestamp_is_iso_utc(self):
        now = datetime(2024, 5, 18, 9, 30, 15, 123456, tzinfo=timezone.utc)

        entry = JourneyEntry.from_submission({'pollChoice': '90%'}, now=now)

        assert entry.ts == '2024-05-18T09:30:15.123Z'
        assert entry.to_record()['pollChoice'] == '90%'
