"""Core components for font identity: configuration and the error taxonomy."""

from .config import AppConfig, ReleaseClientConfig, load_config_from_yaml
from .exceptions import (
    ConfigurationError,
    FontIdentError,
    FontNotFoundError,
    FontValidationError,
    IntegrityViolationError,
    ReleaseError,
    WrongEnumerationFamilyError,
)

__all__ = [
    "AppConfig",
    "ConfigurationError",
    "FontIdentError",
    "FontNotFoundError",
    "FontValidationError",
    "IntegrityViolationError",
    "ReleaseClientConfig",
    "ReleaseError",
    "WrongEnumerationFamilyError",
    "load_config_from_yaml",
]
