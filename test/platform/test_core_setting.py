import pytest

from src.platform.config.core_setting import Settings
from src.platform.constant import path


@pytest.mark.unit
class TestCorsOrigins:
    def test_wildcard_from_env(self, monkeypatch):
        monkeypatch.setenv('BACKEND_CORS_ORIGINS', '*')

        assert Settings(_env_file=None).BACKEND_CORS_ORIGINS == ['*']

    def test_comma_separated_from_env(self, monkeypatch):
        monkeypatch.setenv('BACKEND_CORS_ORIGINS', 'http://a.test, http://b.test')

        settings = Settings(_env_file=None)

        assert settings.BACKEND_CORS_ORIGINS == ['http://a.test', 'http://b.test']

    def test_json_list_from_env(self, monkeypatch):
        monkeypatch.setenv('BACKEND_CORS_ORIGINS', '["http://a.test"]')

        assert Settings(_env_file=None).BACKEND_CORS_ORIGINS == ['http://a.test']

    def test_example_env_file_loads(self, monkeypatch):
        monkeypatch.delenv('BACKEND_CORS_ORIGINS', raising=False)

        settings = Settings(_env_file=path.BASE_DIR / '.env.example')

        assert settings.BACKEND_CORS_ORIGINS == ['*']
