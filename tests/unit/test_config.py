"""
tests/unit/test_config.py - Tests for environment configuration.
"""

import pytest

from fleetwatch import config as config_module
from fleetwatch.config import (
    DEFAULT_API_BASE_URL,
    ApiConfig,
    FleetwatchConfig,
    get_config,
    set_config,
)


@pytest.fixture
def restore_config():
    saved = config_module._DEFAULT_CONFIG
    yield
    set_config(saved)


class TestApiConfig:
    """Tests for ApiConfig."""

    def test_defaults(self):
        config = ApiConfig()

        assert config.base_url == DEFAULT_API_BASE_URL
        assert config.components_url("42") == "/components-by-vessel/42"

    def test_vessel_id_is_url_encoded(self):
        config = ApiConfig()
        assert config.components_url("V 1/../admin") == "/components-by-vessel/V%201%2F..%2Fadmin"
        assert config.components_url(42) == "/components-by-vessel/42"

    def test_trailing_slash_stripped(self):
        assert ApiConfig(base_url="https://api.example.com/v1/").base_url == "https://api.example.com/v1"

    def test_invalid_timeout(self):
        with pytest.raises(AssertionError):
            ApiConfig(timeout_seconds=0)

    def test_path_needs_placeholder(self):
        with pytest.raises(AssertionError):
            ApiConfig(components_path="/components")

    def test_from_env(self, monkeypatch):
        monkeypatch.setenv("FLEETWATCH_API_BASE_URL", "https://api.example.com")
        monkeypatch.setenv("FLEETWATCH_API_KEY", "key-1")
        monkeypatch.setenv("FLEETWATCH_API_TOKEN", "tok-1")
        monkeypatch.setenv("FLEETWATCH_API_TIMEOUT", "5")
        monkeypatch.setenv("FLEETWATCH_COMPONENTS_PATH", "/vessels/{vessel_id}/components")

        config = ApiConfig.from_env()

        assert config.base_url == "https://api.example.com"
        assert config.api_key == "key-1"
        assert config.token == "tok-1"
        assert config.timeout_seconds == 5.0
        assert config.components_url("V1") == "/vessels/V1/components"


class TestFleetwatchConfig:
    """Tests for the top-level configuration."""

    def test_from_env(self, monkeypatch):
        monkeypatch.setenv("FLEETWATCH_LOG_LEVEL", "debug")
        monkeypatch.setenv("FLEETWATCH_EMIT_EVENTS", "false")

        config = FleetwatchConfig.from_env()

        assert config.log_level == "DEBUG"
        assert config.emit_events is False

    def test_get_and_set(self, restore_config):
        custom = FleetwatchConfig(log_level="WARNING", emit_events=False)
        set_config(custom)
        assert get_config() is custom

    def test_lazy_default(self, restore_config, monkeypatch):
        monkeypatch.setenv("FLEETWATCH_LOG_LEVEL", "error")
        set_config(None)
        assert get_config().log_level == "ERROR"
