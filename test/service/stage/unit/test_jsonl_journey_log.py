"""
Unit tests for JsonlJourneyLogImpl

Runs against real files under tmp_path.
"""

import orjson
import pytest

from src.platform.exception.exceptions import JourneyLogReadError, JourneyLogWriteError
from src.service.stage.domain.entity.journey_entry import JourneyEntry
from src.service.stage.driven_adapter.journey.jsonl_journey_log_impl import JsonlJourneyLogImpl


@pytest.mark.unit
class TestJsonlJourneyLog:
    @pytest.fixture
    def file_path(self, tmp_path):
        return tmp_path / 'data' / 'journey_submissions.jsonl'

    @pytest.fixture
    async def journey_log(self, file_path):
        log = JsonlJourneyLogImpl(file_path=file_path)
        await log.ensure_exists()
        return log

    @pytest.mark.asyncio
    async def test_ensure_exists_creates_empty_file(self, journey_log, file_path):
        assert file_path.read_text() == ''
        assert await journey_log.count_entries() == 0

    @pytest.mark.asyncio
    async def test_ensure_exists_keeps_existing_entries(self, file_path):
        file_path.parent.mkdir(parents=True)
        file_path.write_text('{"name":"a"}\n')

        log = JsonlJourneyLogImpl(file_path=file_path)
        await log.ensure_exists()

        assert await log.count_entries() == 1

    @pytest.mark.asyncio
    async def test_append_then_list(self, journey_log, file_path):
        await journey_log.append(JourneyEntry.from_submission({'name': 'Ana', 'role': 'parent'}))
        await journey_log.append(JourneyEntry.from_submission({'name': 'Ben'}))

        lines = file_path.read_bytes().splitlines()
        assert len(lines) == 2
        assert orjson.loads(lines[0])['name'] == 'Ana'

        entries = await journey_log.list_entries()
        assert [entry['name'] for entry in entries] == ['Ana', 'Ben']
        assert entries[0]['role'] == 'parent'
        assert await journey_log.count_entries() == 2

    @pytest.mark.asyncio
    async def test_list_skips_unparseable_lines(self, journey_log, file_path):
        file_path.write_text('{"name":"ok"}\nnot json\n\n{"name":"also ok"}\n')

        entries = await journey_log.list_entries()

        assert entries == [{'name': 'ok'}, {'name': 'also ok'}]
        assert await journey_log.count_entries() == 3

    @pytest.mark.asyncio
    async def test_count_entries_on_missing_file(self, tmp_path):
        log = JsonlJourneyLogImpl(file_path=tmp_path / 'missing.jsonl')

        assert await log.count_entries() == 0

    @pytest.mark.asyncio
    async def test_list_read_failure(self, tmp_path):
        log = JsonlJourneyLogImpl(file_path=tmp_path / 'missing.jsonl')

        with pytest.raises(JourneyLogReadError, match='Unable to read journey log'):
            await log.list_entries()

    @pytest.mark.asyncio
    async def test_clear(self, journey_log, file_path):
        await journey_log.append(JourneyEntry.from_submission({'name': 'Ana'}))

        await journey_log.clear()

        assert file_path.read_text() == ''
        assert await journey_log.list_entries() == []

    @pytest.mark.asyncio
    async def test_write_failures(self, tmp_path):
        # A directory where the file should be
        log = JsonlJourneyLogImpl(file_path=tmp_path)

        with pytest.raises(JourneyLogWriteError):
            await log.clear()
        with pytest.raises(JourneyLogWriteError):
            await log.append(JourneyEntry.from_submission({}))
