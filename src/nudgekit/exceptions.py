"""Custom exceptions for NudgeKit."""

from typing import Any


class NudgeKitError(Exception):
    """Base exception for all NudgeKit errors."""

    def __init__(
        self,
        message: str,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message)
        self.details = details or {}


class BoundaryError(NudgeKitError):
    """Raised when an offset or line lies outside the buffer."""

    def __init__(
        self,
        message: str,
        offset: int | None = None,
        line: int | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message, details)
        self.offset = offset
        self.line = line


class EditGeometryError(NudgeKitError):
    """Raised when an edit's before/after split falls outside its line."""


class EvaluatorError(NudgeKitError):
    """Raised when an evaluator fails for a reason other than buffer geometry."""

    def __init__(
        self,
        message: str,
        feature_id: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message, details)
        self.feature_id = feature_id


class RegistryError(NudgeKitError):
    """Raised when evaluator registry operations fail."""


class CatalogError(NudgeKitError):
    """Raised when a suggestion cannot be found in the catalog."""


class ConfigError(NudgeKitError):
    """Raised when a configuration file cannot be read or parsed."""


class ConfigValidationError(ConfigError):
    """Raised when configuration content is invalid."""
