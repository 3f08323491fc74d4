"""
Test Configuration and Fixtures

Architecture:
- Unit tests (test/**/unit/): plain objects, MagicMock broadcasters, tmp_path files
- Integration tests (test/**/integration/): FastAPI app through TestClient
"""

# =============================================================================
# CRITICAL: Environment setup MUST happen before any other imports
# Settings and the loguru config read the environment at import time
# =============================================================================
import os
from pathlib import Path
import tempfile


def _early_setup_test_environment() -> None:
    """Set test environment variables before any module imports."""
    # Create test log directory
    test_log_dir = Path(__file__).parent / 'test_log'
    test_log_dir.mkdir(exist_ok=True)
    os.environ['TEST_LOG_DIR'] = str(test_log_dir)

    # Journey log, pages and show assets live in a throwaway directory
    sandbox = Path(tempfile.mkdtemp(prefix='stage_test_'))
    os.environ['DATA_DIR'] = str(sandbox / 'data')
    os.environ['PUBLIC_DIR'] = str(sandbox / 'public')
    os.environ['CONTENT_DIR'] = str(sandbox / 'content')

    # Compress the scripted flow: 140s of cues fire within ~14ms
    os.environ.setdefault('TIMELINE_TIME_SCALE', '0.0001')


# Call immediately to set env vars before any imports
_early_setup_test_environment()

from collections.abc import AsyncIterator, Generator  # noqa: E402
from contextlib import asynccontextmanager  # noqa: E402

from fastapi import FastAPI  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402
import pytest  # noqa: E402

from src.platform.app_factory import create_app  # noqa: E402
from src.platform.config.di import container  # noqa: E402
from src.platform.config.wire_modules import WIRE_MODULES  # noqa: E402
from src.platform.logging.loguru_io import Logger  # noqa: E402


@asynccontextmanager
async def lifespan_for_tests(app: FastAPI) -> AsyncIterator[None]:
    """
    Minimal lifespan for testing (no tracing export).

    Only initializes essential resources:
    - Dependency injection
    - Journey log file and the seeded submission counter
    """
    Logger.base.info('🧪 [Test App] Starting up...')

    container.wire(modules=WIRE_MODULES)

    journey_log = container.journey_log()
    await journey_log.ensure_exists()
    container.session_state().journey_count = await journey_log.count_entries()

    yield

    container.timeline_scheduler().shutdown()
    container.unwire()
    Logger.base.info('👋 [Test App] Shutdown complete')


app = create_app(lifespan=lifespan_for_tests, title_suffix=' (Test)')


@pytest.fixture
def client() -> Generator[TestClient, None, None]:
    """Fresh session state per test; the journey file on disk is shared."""
    container.reset_singletons()
    with TestClient(app) as test_client:
        yield test_client
    container.reset_singletons()


@pytest.fixture
def stage_app() -> FastAPI:
    return app
