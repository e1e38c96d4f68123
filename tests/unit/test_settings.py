"""Unit tests for environment-driven SDK settings."""

from __future__ import annotations

import pytest

from content_sdk.config.settings import Settings


@pytest.fixture
def clean_env(monkeypatch: pytest.MonkeyPatch) -> pytest.MonkeyPatch:
    for name in (
        "CONTENT_SERVICE_SCHEME",
        "CONTENT_SERVICE_HOST",
        "ORIGIN",
        "SESSION_TOKEN_HEADER",
        "XSRF_TOKEN_HEADER",
        "APP_ENV",
        "LOG_LEVEL",
    ):
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


class TestSettings:
    def test_defaults(self, clean_env: pytest.MonkeyPatch) -> None:
        settings = Settings(_env_file=None)
        assert settings.content_service_base_url == "https://localhost:10003"
        assert settings.origin == "http://localhost:10001"
        assert settings.session_token_header == "X-Session-Token"
        assert settings.xsrf_token_header == "X-Xsrf-Token"
        assert settings.log_level == "INFO"

    def test_environment_overrides(self, clean_env: pytest.MonkeyPatch) -> None:
        clean_env.setenv("CONTENT_SERVICE_SCHEME", "http")
        clean_env.setenv("CONTENT_SERVICE_HOST", "content:10003")
        clean_env.setenv("XSRF_TOKEN_HEADER", "X-Custom-Xsrf")
        settings = Settings(_env_file=None)
        assert settings.content_service_base_url == "http://content:10003"
        assert settings.xsrf_token_header == "X-Custom-Xsrf"

    def test_trailing_slash_dropped(self, clean_env: pytest.MonkeyPatch) -> None:
        settings = Settings(_env_file=None, content_service_host="content.test/")
        assert settings.content_service_base_url == "https://content.test"

    def test_env_file(self, clean_env: pytest.MonkeyPatch, tmp_path) -> None:
        env_file = tmp_path / ".env"
        env_file.write_text("CONTENT_SERVICE_HOST=from-file:9000\nUNRELATED=1\n")
        settings = Settings(_env_file=env_file)
        assert settings.content_service_host == "from-file:9000"

    def test_module_singleton(self) -> None:
        from content_sdk.config import settings

        assert isinstance(settings, Settings)
        assert settings.content_service_base_url.startswith(settings.content_service_scheme)
