"""Blueprint domain exceptions."""

from __future__ import annotations

from typing import Optional


class BlueprintError(Exception):
    """Base exception for blueprint operations."""

    def __init__(self, message: str, error_code: str = "BLUEPRINT_ERROR", original_error: Optional[Exception] = None):
        super().__init__(message)
        self.error_code = error_code # Error code
        self.original_error = original_error # Original error


class BlueprintNotFoundError(BlueprintError):
    """No blueprint exists for the requested key or author."""

    def __init__(self, message: str = "Blueprint not found", original_error: Optional[Exception] = None):
        super().__init__(message, "NOT_FOUND", original_error)


class DuplicateBlueprintError(BlueprintError):
    """A blueprint with the same (author, name) is already stored."""

    def __init__(self, message: str = "Blueprint already exists", original_error: Optional[Exception] = None):
        super().__init__(message, "ALREADY_EXISTS", original_error)


class BlueprintValidationError(BlueprintError):
    """Payload could not be turned into a blueprint, or disagrees with its target key."""

    def __init__(self, message: str = "Validation failed", original_error: Optional[Exception] = None):
        super().__init__(message, "VALIDATION_ERROR", original_error)


class BlueprintConfigurationError(BlueprintError):
    """Service configuration is invalid (filter, port, ...)."""

    def __init__(self, message: str = "Invalid configuration", original_error: Optional[Exception] = None):
        super().__init__(message, "CONFIGURATION_ERROR", original_error)


class FilterConfigurationError(BlueprintConfigurationError):
    """Unknown or unusable filter selection."""

    def __init__(self, message: str = "Invalid filter configuration", original_error: Optional[Exception] = None):
        super().__init__(message, original_error)
