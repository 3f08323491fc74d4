"""Journey Log Interface (Port)

Append-only record of audience journey submissions, one JSON object per line.
"""

from abc import ABC, abstractmethod
from typing import Any

from src.service.stage.domain.entity.journey_entry import JourneyEntry


class IJourneyLog(ABC):
    @abstractmethod
    async def ensure_exists(self) -> None:
        """Create the log file (and its directory) if missing"""
        pass

    @abstractmethod
    async def count_entries(self) -> int:
        """
        Count stored submissions (non-empty lines)

        Returns:
            Number of entries, 0 when the log cannot be read
        """
        pass

    @abstractmethod
    async def append(self, entry: JourneyEntry) -> None:
        """
        Append one submission as its own line

        Raises:
            JourneyLogWriteError: the line could not be written
        """
        pass

    @abstractmethod
    async def list_entries(self) -> list[dict[str, Any]]:
        """
        Read every parseable submission, in submission order

        Raises:
            JourneyLogReadError: the log could not be read
        """
        pass

    @abstractmethod
    async def clear(self) -> None:
        """
        Truncate the log

        Raises:
            JourneyLogWriteError: the log could not be truncated
        """
        pass
