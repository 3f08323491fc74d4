"""
JSON Lines Journey Log Implementation

One orjson-encoded submission per line, appended in arrival order. Only the
event loop thread writes, so appends never interleave.
"""

from pathlib import Path
from typing import Any

import anyio
import orjson

from src.platform.exception.exceptions import JourneyLogReadError, JourneyLogWriteError
from src.platform.logging.loguru_io import Logger
from src.service.stage.app.interface.i_journey_log import IJourneyLog
from src.service.stage.domain.entity.journey_entry import JourneyEntry


class JsonlJourneyLogImpl(IJourneyLog):
    def __init__(self, *, file_path: Path | str) -> None:
        self.file_path = anyio.Path(file_path)

    async def ensure_exists(self) -> None:
        await self.file_path.parent.mkdir(parents=True, exist_ok=True)
        if not await self.file_path.exists():
            await self.file_path.write_text('', encoding='utf-8')
            Logger.base.info(f'📓 [JOURNEY] Created log at {self.file_path}')

    async def count_entries(self) -> int:
        try:
            content = await self.file_path.read_text(encoding='utf-8')
        except OSError as e:
            Logger.base.warning(f'⚠️ [JOURNEY] Unable to count entries, assuming 0: {e}')
            return 0
        return sum(1 for line in content.split('\n') if line)

    async def append(self, entry: JourneyEntry) -> None:
        line = orjson.dumps(entry.to_record()) + b'\n'
        try:
            async with await anyio.open_file(self.file_path, 'ab') as f:
                await f.write(line)
        except OSError as e:
            raise JourneyLogWriteError() from e

    async def list_entries(self) -> list[dict[str, Any]]:
        try:
            content = await self.file_path.read_bytes()
        except OSError as e:
            raise JourneyLogReadError() from e

        entries = []
        for line in content.split(b'\n'):
            if not line.strip():
                continue
            try:
                entries.append(orjson.loads(line))
            except orjson.JSONDecodeError:
                Logger.base.warning(f'⚠️ [JOURNEY] Skipping unparseable line: {line[:80]!r}')
        return entries

    async def clear(self) -> None:
        try:
            await self.file_path.write_bytes(b'')
        except OSError as e:
            raise JourneyLogWriteError() from e
        Logger.base.info('📓 [JOURNEY] Log cleared')
