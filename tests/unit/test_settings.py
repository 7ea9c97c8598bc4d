"""
Unit Tests for Settings and Logging Configuration
=================================================
"""

from pathlib import Path

import pytest
from pydantic import ValidationError

from tee_skin_api.config.logging import get_logging_config
from tee_skin_api.config.settings import Settings


class TestSettings:
    """Test settings parsing and validation."""

    def test_defaults(self, monkeypatch):
        for name in (
            "TEE_SKIN_ENVIRONMENT",
            "TEE_SKIN_LOG_LEVEL",
            "TEE_SKIN_RENDER_ENGINE_URL",
            "TEE_SKIN_DEBUG",
        ):
            monkeypatch.delenv(name, raising=False)

        settings = Settings(_env_file=None)

        assert settings.port == 3000
        assert settings.environment == "development"
        assert settings.debug is False
        assert settings.render_engine_url == "http://skin-renderer:8080"
        assert settings.base_url == "http://localhost:3000"

    def test_invalid_environment(self):
        with pytest.raises(ValidationError):
            Settings(_env_file=None, environment="staging")

    def test_log_level_is_uppercased(self):
        assert Settings(_env_file=None, log_level="debug").log_level == "DEBUG"

    def test_invalid_log_level(self):
        with pytest.raises(ValidationError):
            Settings(_env_file=None, log_level="chatty")

    def test_engine_url_trailing_slash_is_removed(self):
        settings = Settings(_env_file=None, render_engine_url="http://engine:8080/")

        assert settings.render_engine_url == "http://engine:8080"

    def test_allowed_hosts_from_comma_separated_string(self):
        settings = Settings(_env_file=None, allowed_hosts="a.example, b.example")

        assert settings.allowed_hosts == ["a.example", "b.example"]

    def test_allowed_hosts_from_json_string(self):
        settings = Settings(_env_file=None, allowed_hosts='["https://skins.example"]')

        assert settings.allowed_hosts == ["https://skins.example"]

    def test_public_url_overrides_base_url(self):
        settings = Settings(_env_file=None, public_url="https://skins.example/")

        assert settings.base_url == "https://skins.example"


class TestLoggingConfig:
    """Test the stdlib logging dictionary."""

    def test_testing_environment_logs_to_console_only(self):
        config = get_logging_config(Settings(_env_file=None, environment="testing"))

        assert set(config["handlers"]) == {"console"}
        assert config["loggers"][""]["handlers"] == ["console"]

    def test_file_handlers_outside_testing(self, tmp_path: Path):
        settings = Settings(_env_file=None, environment="development", log_dir=tmp_path)
        config = get_logging_config(settings)

        assert config["handlers"]["file"]["filename"] == str(tmp_path / "app.log")
        assert config["handlers"]["error_file"]["level"] == "ERROR"

    def test_production_uses_json_formatter(self):
        config = get_logging_config(Settings(_env_file=None, environment="production"))

        assert config["handlers"]["console"]["formatter"] == "json"
