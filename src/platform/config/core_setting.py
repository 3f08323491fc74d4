from pathlib import Path
from typing import Annotated, List

import orjson
from pydantic import field_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict

from src.platform.constant import path


_PROJECT_ROOT = path.BASE_DIR
_ENV_PATH = _PROJECT_ROOT / '.env'
_ENV_FILE = _ENV_PATH if _ENV_PATH.exists() else (_PROJECT_ROOT / '.env.example')


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=str(_ENV_FILE),
        env_ignore_empty=True,
        extra='ignore',
    )

    PROJECT_NAME: str = 'Stage Broadcast'
    VERSION: str = '0.1.0'
    DEBUG: bool = True  # Set to False in production

    # CORS (viewers and the admin console may be served from anywhere in the room)
    BACKEND_CORS_ORIGINS: Annotated[List[str], NoDecode] = ['*']

    @field_validator('BACKEND_CORS_ORIGINS', mode='before')
    @classmethod
    def assemble_cors_origins(cls, v: str | List[str]) -> List[str]:
        if isinstance(v, str) and v.startswith('['):
            return orjson.loads(v)
        if isinstance(v, str):
            return [i.strip() for i in v.split(',') if i.strip()]
        elif isinstance(v, list):
            return v
        return []

    # Storage
    DATA_DIR: Path = path.DATA_DIR
    JOURNEY_FILE_NAME: str = 'journey_submissions.jsonl'

    # Front-end assets
    PUBLIC_DIR: Path = path.PUBLIC_DIR
    CONTENT_DIR: Path = path.CONTENT_DIR

    # Viewer stream
    SSE_PING_INTERVAL: int = 15  # seconds
    VIEWER_STREAM_BUFFER_SIZE: int = 100  # events buffered per viewer before dropping

    # Show flow
    TIMELINE_TIME_SCALE: float = 1.0  # < 1.0 compresses the scripted flow (rehearsals, tests)
    DEFAULT_POLL_DURATION_MS: int = 15000
    PRESET_POLL_DURATION_MS: int = 20000

    # Observability
    OTEL_SERVICE_NAME: str = 'stage-broadcast'
    LOG_TIMEZONE: str = 'Asia/Singapore'

    @property
    def JOURNEY_FILE(self) -> Path:
        return self.DATA_DIR / self.JOURNEY_FILE_NAME


settings = Settings()  # type: ignore
