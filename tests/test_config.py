"""Tests for configuration loading."""

import pytest
from pydantic import ValidationError

from hnapi.config import (
    DEFAULT_BASE_URL,
    ClientConfig,
    Config,
    ConfigModel,
    load_config,
    save_config,
)


class TestClientConfig:
    """The immutable per-client settings."""

    def test_defaults(self):
        config = ClientConfig()
        assert config.base_url == DEFAULT_BASE_URL
        assert config.user_agent.startswith("hnapi/")

    def test_trailing_slash_stripped(self):
        assert ClientConfig(base_url="http://localhost:8080/v0/").base_url == "http://localhost:8080/v0"

    def test_rejects_non_http_url(self):
        with pytest.raises(ValidationError):
            ClientConfig(base_url="ftp://example.com")

    def test_frozen(self):
        config = ClientConfig()
        with pytest.raises(ValidationError):
            config.base_url = "http://other"


class TestConfigLoader:
    """YAML config file handling."""

    def test_missing_file_uses_defaults(self, tmp_path, monkeypatch):
        monkeypatch.delenv("HN_API_URL", raising=False)
        config = Config(tmp_path / "config.yaml")

        assert config.config == ConfigModel()
        assert config.get_client_config().base_url == DEFAULT_BASE_URL

    def test_load_config(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text("api:\n  base_url: http://localhost:9000/v0\nlogging:\n  level: debug\n")

        config = load_config(path)

        assert config.api.base_url == "http://localhost:9000/v0"
        assert config.logging.level == "DEBUG"

    def test_empty_file(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text("")
        assert load_config(path) == ConfigModel()

    def test_load_missing_file_raises(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_config(tmp_path / "nope.yaml")

    def test_invalid_yaml(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text("api: [unclosed\n")
        with pytest.raises(ValueError, match="Invalid YAML"):
            load_config(path)

    def test_invalid_values(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text("logging:\n  level: LOUD\n")
        with pytest.raises(ValueError, match="Invalid configuration"):
            load_config(path)

    def test_save_and_reload(self, tmp_path):
        path = tmp_path / "nested" / "config.yaml"
        config = ConfigModel(api=ClientConfig(base_url="http://localhost:1/v0"))

        save_config(config, path)

        assert load_config(path) == config

    def test_env_overrides_base_url(self, tmp_path, monkeypatch):
        monkeypatch.setenv("HN_API_URL", "http://mirror.test/v0/")
        config = Config(tmp_path / "config.yaml")

        assert config.get_client_config().base_url == "http://mirror.test/v0"

    def test_env_override_can_be_disabled(self, tmp_path, monkeypatch):
        monkeypatch.setenv("HN_API_URL", "http://mirror.test/v0")
        path = tmp_path / "config.yaml"
        path.write_text("api:\n  base_url_env: null\n")

        assert Config(path).get_client_config().base_url == DEFAULT_BASE_URL
