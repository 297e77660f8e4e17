# File: tests/unit/test_config_manager.py
"""
Unit tests for loading the digest configuration.
"""

import json

import pytest

from src.core.config_manager import Config
from src.core.exceptions import ConfigurationError


@pytest.fixture
def config_file(tmp_path, monkeypatch):
    """Point Config at a temporary config.json with no env overrides."""
    path = tmp_path / "config.json"
    monkeypatch.setattr(Config, "CONFIG_FILE", path)
    monkeypatch.setattr(Config, "CALENDAR_IDS", [])
    monkeypatch.setattr(Config, "WEBHOOK_URLS", [])
    monkeypatch.setattr(Config, "DIGEST_TITLE", None)
    monkeypatch.setattr(Config, "PUBLIC_URL", None)
    monkeypatch.setattr(Config, "TARGET_TIMEZONE", "America/Chicago")
    monkeypatch.setattr(Config, "WEBHOOK_TIMEOUT", None)
    return path


def _write(path, data):
    path.write_text(json.dumps(data), encoding="utf-8")


class TestLoadDigestConfig:
    """config.json plus environment overrides."""

    def test_from_file(self, config_file):
        _write(config_file, {
            "calendars": ["guild@group.calendar.google.com"],
            "webhooks": ["https://discord.com/api/webhooks/1/x"],
            "title": "Guild Calendar",
            "public_url": "https://calendar.example.com"
        })

        config = Config.load_digest_config()

        assert config.calendars == ["guild@group.calendar.google.com"]
        assert config.title == "Guild Calendar"
        assert config.public_url == "https://calendar.example.com"
        assert config.timezone == "America/Chicago"

    def test_environment_overrides_file(self, config_file, monkeypatch):
        _write(config_file, {
            "calendars": ["file@group.calendar.google.com"],
            "webhooks": ["https://discord.com/api/webhooks/1/x"],
            "title": "From File"
        })
        monkeypatch.setattr(Config, "CALENDAR_IDS", ["env1", "env2"])
        monkeypatch.setattr(Config, "DIGEST_TITLE", "From Env")

        config = Config.load_digest_config()

        assert config.calendars == ["env1", "env2"]
        assert config.title == "From Env"
        assert config.webhooks == ["https://discord.com/api/webhooks/1/x"]

    def test_environment_only(self, config_file, monkeypatch):
        monkeypatch.setattr(Config, "CALENDAR_IDS", ["env1"])
        monkeypatch.setattr(Config, "WEBHOOK_URLS", ["https://discord.com/api/webhooks/1/x"])
        monkeypatch.setattr(Config, "DIGEST_TITLE", "Env Calendar")

        config = Config.load_digest_config()

        assert config.calendars == ["env1"]
        assert config.public_url is None

    def test_missing_values_raise(self, config_file):
        _write(config_file, {"calendars": ["c"], "title": "No hooks"})

        with pytest.raises(ConfigurationError, match="webhook"):
            Config.load_digest_config()

    def test_invalid_json_raises(self, config_file):
        config_file.write_text("{not json", encoding="utf-8")

        with pytest.raises(ConfigurationError, match="Invalid JSON"):
            Config.load_digest_config()


class TestWebhookTimeout:
    """WEBHOOK_TIMEOUT is parsed when asked for, not at import."""

    def test_default(self, config_file):
        assert Config.webhook_timeout() == 10.0

    def test_from_environment(self, config_file, monkeypatch):
        monkeypatch.setattr(Config, "WEBHOOK_TIMEOUT", "2.5")
        assert Config.webhook_timeout() == 2.5

    @pytest.mark.parametrize("raw", ["ten", "0", "-3"])
    def test_bad_value_raises_configuration_error(self, config_file, monkeypatch, raw):
        monkeypatch.setattr(Config, "WEBHOOK_TIMEOUT", raw)
        with pytest.raises(ConfigurationError, match="WEBHOOK_TIMEOUT"):
            Config.webhook_timeout()

    def test_bad_value_fails_validation(self, config_file, tmp_path, monkeypatch):
        _write(config_file, {"calendars": ["c"], "webhooks": ["w"], "title": "T"})
        token = tmp_path / "token.json"
        token.write_text("{}")
        monkeypatch.setattr(Config, "TOKEN_FILE", token)
        monkeypatch.setattr(Config, "WEBHOOK_TIMEOUT", "soon")

        assert Config.validate() is False


class TestValidate:
    """Config.validate reports problems instead of raising."""

    def test_missing_credentials(self, config_file, tmp_path, monkeypatch):
        _write(config_file, {"calendars": ["c"], "webhooks": ["w"], "title": "T"})
        monkeypatch.setattr(Config, "CREDENTIALS_FILE", tmp_path / "credentials.json")
        monkeypatch.setattr(Config, "TOKEN_FILE", tmp_path / "token.json")

        assert Config.validate() is False

    def test_valid(self, config_file, tmp_path, monkeypatch):
        _write(config_file, {"calendars": ["c"], "webhooks": ["w"], "title": "T"})
        token = tmp_path / "token.json"
        token.write_text("{}")
        monkeypatch.setattr(Config, "TOKEN_FILE", token)

        assert Config.validate() is True
