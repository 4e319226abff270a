"""Custom exceptions for the font identity system."""

from typing import Any


class FontIdentError(Exception):
    """Base exception for all fontident errors."""

    def __init__(self, message: str, details: Any | None = None):
        super().__init__(message)
        self.details = details


class FontValidationError(FontIdentError):
    """Exception raised for input validation errors."""


class ConfigurationError(FontIdentError):
    """Exception raised for configuration errors."""


class ReleaseError(FontIdentError):
    """Exception raised by the release client."""


class FontNotFoundError(FontIdentError, LookupError):
    """Exception raised when a legacy name, enumerator name or numeric code has no mapping."""

    def __init__(self, name: str | int, kind: str = "Font"):
        super().__init__(f"Found unknown {kind} '{name}'", details={"name": name, "kind": kind})
        self.name = name
        self.kind = kind


class WrongEnumerationFamilyError(FontIdentError, TypeError):
    """Exception raised when an enumerator from another family is supplied."""

    def __init__(self, expected: Any, actual: Any):
        expected_name = getattr(expected, "value", expected)
        actual_name = getattr(actual, "value", actual)
        super().__init__(
            f"Expected value to be a {expected_name}, got {actual_name}",
            details={"expected": expected_name, "actual": actual_name},
        )
        self.expected = expected
        self.actual = actual


class IntegrityViolationError(FontIdentError):
    """Exception raised when the external document model produces a code this library does not know.

    This is a defect signal: the document model and this library disagree on the set of
    valid codes. It is intentionally not a ``LookupError`` so that handlers for the
    recoverable not-found case never swallow it.
    """

    def __init__(self, field: str, code: Any):
        super().__init__(
            f"Missing font {field} for external code {code!r}",
            details={"field": field, "code": code},
        )
        self.field = field
        self.code = code


class CatalogIntegrityError(FontIdentError):
    """Exception raised when a legacy font table contains duplicate names."""

    def __init__(self, duplicates: list[str]):
        super().__init__(f"Duplicate legacy font names in catalog: {duplicates}")
        self.duplicates = duplicates


class InvalidBoldValueError(FontValidationError):
    """Exception raised when Bold is assigned a non-boolean value."""

    def __init__(self, value: Any):
        super().__init__(f"Bold must be a boolean, got {type(value).__name__}")


class InvalidAssetIdError(FontValidationError):
    """Exception raised for font asset ids that are not non-negative integers."""

    def __init__(self, asset_id: Any):
        super().__init__(f"Font asset id must be a non-negative integer, got {asset_id!r}")


class ConfigFileNotFoundError(ConfigurationError):
    """Exception raised when configuration file is not found."""

    def __init__(self, config_path: str):
        super().__init__(f"Configuration file not found: {config_path}")


class EmptyConfigFileError(ConfigurationError):
    """Exception raised when configuration file is empty."""

    def __init__(self, config_path: str):
        super().__init__(f"Empty configuration file: {config_path}")


class InvalidYamlError(ConfigurationError):
    """Exception raised for invalid YAML content."""

    def __init__(self, config_path: str, error: str):
        super().__init__(f"Invalid YAML in {config_path}: {error}")


class ConfigLoadError(ConfigurationError):
    """Exception raised when configuration loading fails."""

    def __init__(self, error: str):
        super().__init__(f"Failed to load configuration: {error}")


class InvalidEndpointUrlError(ValueError):
    """Exception raised for invalid API endpoint URLs."""

    def __init__(self):
        super().__init__("API URL must start with https:// or http://")


class InvalidLogLevelError(ValueError):
    """Exception raised for unknown log level names."""

    def __init__(self, level: str):
        super().__init__(f"Unknown log level: {level}")


class ReleaseRequestError(ReleaseError):
    """Exception raised when a release API request fails."""

    def __init__(self, action: str, error: str):
        super().__init__(f"Failed to {action}: {error}")


class ReleaseNotFoundError(ReleaseError):
    """Exception raised when no release carries the requested tag."""

    def __init__(self, tag: str):
        super().__init__(f"Failed to find release for version {tag}")
        self.tag = tag


class ReleaseAssetNotFoundError(ReleaseError):
    """Exception raised when a release has no asset with the requested name."""

    def __init__(self, asset_name: str, tag: str):
        super().__init__(f"Failed to find release asset '{asset_name}' for release '{tag}'")
        self.asset_name = asset_name
        self.tag = tag


class AssetWriteError(ReleaseError):
    """Exception raised when a downloaded asset cannot be written to disk."""

    def __init__(self, path: str, error: str):
        super().__init__(f"Failed to write file at path '{path}': {error}")
