"""Configuration management for the font identity system."""

import logging
from pathlib import Path

import yaml
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from fontident import __version__

from .exceptions import (
    ConfigFileNotFoundError,
    ConfigLoadError,
    ConfigurationError,
    EmptyConfigFileError,
    InvalidEndpointUrlError,
    InvalidLogLevelError,
    InvalidYamlError,
)


class ReleaseClientConfig(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="RELEASES_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )
    """Release API client configuration."""

    owner: str = Field("fontident", min_length=1, description="Repository owner")
    repo: str = Field("fontident", min_length=1, description="Repository name")
    api_url: str = Field("https://api.github.com", description="Release API base URL")
    api_version: str = Field("2022-11-28", description="X-GitHub-Api-Version header")
    user_agent: str = Field(f"fontident/{__version__}", description="User-Agent header")
    timeout_seconds: float = Field(30.0, gt=0.0, description="Request timeout")
    chunk_size: int = Field(8192, gt=0, description="Download chunk size in bytes")
    show_progress: bool = Field(True, description="Show download progress bars")

    @field_validator("api_url")
    @classmethod
    def validate_api_url(cls, v):
        """Validate API URL format."""
        if not v.startswith(("https://", "http://")):
            raise InvalidEndpointUrlError()
        return v.rstrip("/")


class AppConfig(BaseSettings):
    """Main application configuration that loads from multiple sources."""

    model_config = SettingsConfigDict(
        env_prefix="APP_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    environment: str = Field(
        "development", description="Environment (development, staging, production)"
    )
    log_level: str = Field("INFO", description="Application log level")
    log_format: str = Field(
        "%(asctime)s - %(name)s - %(levelname)s - %(message)s", description="Log format"
    )

    releases: ReleaseClientConfig = Field(default_factory=ReleaseClientConfig)

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v):
        level = str(v).upper()
        if not isinstance(logging.getLevelName(level), int):
            raise InvalidLogLevelError(v)
        return level

    @classmethod
    def load_from_env(cls, env_file: str | Path | None = ".env") -> "AppConfig":
        """Load configuration from environment variables and .env file."""
        if env_file:
            env_file = Path(env_file)
            if env_file.exists():
                return cls(_env_file=env_file)
        return cls()


def load_config_from_yaml(config_path: str | Path, config_class: type) -> BaseSettings:
    """Load configuration from YAML file."""
    config_path = Path(config_path)

    if not config_path.exists():
        raise ConfigFileNotFoundError(str(config_path))

    try:
        with open(config_path) as f:
            config_data = yaml.safe_load(f)

        if config_data is None:
            raise EmptyConfigFileError(str(config_path))

        # For BaseSettings classes, disable .env loading for this instance
        if issubclass(config_class, BaseSettings):

            class TempConfig(config_class):
                model_config = SettingsConfigDict(
                    env_file=None,
                    case_sensitive=False,
                    extra="ignore",
                )

            return TempConfig(**config_data)
        return config_class(**config_data)

    except ConfigurationError:
        raise
    except yaml.YAMLError as e:
        raise InvalidYamlError(str(config_path), str(e)) from e
    except Exception as e:
        raise ConfigLoadError(str(e)) from e


def _add_yaml_methods():
    """Add YAML loading methods to configuration classes."""

    @classmethod
    def from_yaml(cls, config_path: str | Path):
        """Load configuration from YAML file."""
        return load_config_from_yaml(config_path, cls)

    @classmethod
    def from_env_and_yaml(cls, yaml_path: str | Path | None = None, env_file: str = ".env"):
        """Load configuration from environment variables and optionally override with YAML."""
        if yaml_path and Path(yaml_path).exists():
            return cls.from_yaml(yaml_path)
        return cls(_env_file=env_file if Path(env_file).exists() else None)

    for config_class in [ReleaseClientConfig, AppConfig]:
        config_class.from_yaml = from_yaml
        config_class.from_env_and_yaml = from_env_and_yaml


_add_yaml_methods()
