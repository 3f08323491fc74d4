import pytest

from src.platform.exception.exceptions import DomainError
from src.platform.logging.loguru_io import Logger, LoguruIO
from src.platform.logging.loguru_io_utils import MASK, MAX_CONTENT_LENGTH


@pytest.mark.unit
class TestLoguruIO:
    @pytest.fixture
    def io(self) -> LoguruIO:
        return LoguruIO(custom_logger=Logger.base, truncate_content=True)

    def test_masks_contact_details(self, io):
        masked = io.mask_sensitive({'body': {'name': 'Ana', 'email': 'ana@example.com', 'contact': '9123'}})

        assert masked == {'body': {'name': 'Ana', 'email': MASK, 'contact': MASK}}

    def test_truncates_long_text(self, io):
        masked = io.mask_sensitive({'notes': 'x' * 1000})

        assert masked['notes'].endswith('(1000 chars)')
        assert len(masked['notes']) < 1000
        assert MAX_CONTENT_LENGTH < 1000

    def test_decorated_sync_function_returns_value(self):
        @Logger.io
        def add(a, b):
            return a + b

        assert add(1, 2) == 3

    @pytest.mark.asyncio
    async def test_decorated_async_function_reraises_once_logged(self):
        @Logger.io
        async def fail():
            raise DomainError('Missing type')

        with pytest.raises(DomainError) as exc_info:
            await fail()

        assert exc_info.value._has_logged is True  # type: ignore[attr-defined]
