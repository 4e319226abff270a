"""
Unit tests for core configuration.

Tests configuration loading, validation, environment variables and YAML files.
"""

import pytest
import yaml
from pydantic import ValidationError

from fontident.core.config import AppConfig, ReleaseClientConfig, load_config_from_yaml
from fontident.core.exceptions import ConfigurationError


class TestReleaseClientConfig:
    """Test ReleaseClientConfig validation."""

    def test_defaults(self):
        config = ReleaseClientConfig(_env_file=None)

        assert config.api_url == "https://api.github.com"
        assert config.api_version == "2022-11-28"
        assert config.timeout_seconds == 30.0
        assert config.chunk_size == 8192

    def test_api_url_trailing_slash_stripped(self):
        config = ReleaseClientConfig(_env_file=None, api_url="https://example.com/api/")

        assert config.api_url == "https://example.com/api"

    def test_api_url_scheme_required(self):
        with pytest.raises(ValidationError):
            ReleaseClientConfig(_env_file=None, api_url="ftp://example.com")

    def test_timeout_must_be_positive(self):
        with pytest.raises(ValidationError):
            ReleaseClientConfig(_env_file=None, timeout_seconds=0)

    def test_from_env_vars(self, monkeypatch):
        monkeypatch.setenv("RELEASES_OWNER", "env-owner")
        monkeypatch.setenv("RELEASES_REPO", "env-repo")
        monkeypatch.setenv("RELEASES_SHOW_PROGRESS", "false")

        config = ReleaseClientConfig(_env_file=None)

        assert config.owner == "env-owner"
        assert config.repo == "env-repo"
        assert config.show_progress is False


class TestAppConfig:
    """Test AppConfig loading."""

    def test_log_level_normalised(self):
        assert AppConfig(_env_file=None, log_level="debug").log_level == "DEBUG"

    def test_log_level_validated(self):
        with pytest.raises(ValidationError):
            AppConfig(_env_file=None, log_level="chatty")

    def test_from_env_vars(self, monkeypatch):
        monkeypatch.setenv("APP_LOG_LEVEL", "WARNING")
        monkeypatch.setenv("APP_ENVIRONMENT", "production")

        config = AppConfig(_env_file=None)

        assert config.log_level == "WARNING"
        assert config.environment == "production"

    def test_load_from_env_file(self, tmp_path):
        env_file = tmp_path / ".env"
        env_file.write_text("APP_LOG_LEVEL=ERROR\n")

        assert AppConfig.load_from_env(env_file).log_level == "ERROR"

    def test_load_from_missing_env_file(self, tmp_path):
        assert AppConfig.load_from_env(tmp_path / "missing.env").log_level == "INFO"


class TestYamlLoading:
    """Test YAML configuration files."""

    def test_from_yaml(self, tmp_path):
        config_path = tmp_path / "app.yaml"
        with config_path.open("w") as f:
            yaml.dump(
                {
                    "log_level": "debug",
                    "releases": {"owner": "yaml-owner", "repo": "yaml-repo"},
                },
                f,
            )

        config = AppConfig.from_yaml(config_path)

        assert config.log_level == "DEBUG"
        assert config.releases.owner == "yaml-owner"
        assert config.releases.repo == "yaml-repo"

    def test_from_env_and_yaml_without_yaml(self, tmp_path):
        config = ReleaseClientConfig.from_env_and_yaml(
            yaml_path=None, env_file=str(tmp_path / "missing.env")
        )

        assert isinstance(config, ReleaseClientConfig)

    def test_missing_file(self, tmp_path):
        with pytest.raises(ConfigurationError, match="not found"):
            load_config_from_yaml(tmp_path / "missing.yaml", AppConfig)

    def test_empty_file(self, tmp_path):
        config_path = tmp_path / "empty.yaml"
        config_path.write_text("")

        with pytest.raises(ConfigurationError, match="Empty configuration file"):
            load_config_from_yaml(config_path, AppConfig)

    def test_invalid_yaml(self, tmp_path):
        config_path = tmp_path / "invalid.yaml"
        config_path.write_text("log_level: [unclosed\n")

        with pytest.raises(ConfigurationError, match="Invalid YAML"):
            load_config_from_yaml(config_path, AppConfig)

    def test_invalid_values(self, tmp_path):
        config_path = tmp_path / "bad.yaml"
        config_path.write_text("log_level: chatty\n")

        with pytest.raises(ConfigurationError, match="Failed to load configuration"):
            load_config_from_yaml(config_path, AppConfig)
