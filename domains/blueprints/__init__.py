"""Blueprint domain: value types, errors and payload serializers."""

from .exceptions import (
    BlueprintConfigurationError,
    BlueprintError,
    BlueprintNotFoundError,
    BlueprintValidationError,
    DuplicateBlueprintError,
    FilterConfigurationError,
)
from .models import Blueprint, BlueprintKey, Point

__all__ = [
    "Blueprint",
    "BlueprintKey",
    "Point",
    "BlueprintConfigurationError",
    "BlueprintError",
    "BlueprintNotFoundError",
    "BlueprintValidationError",
    "DuplicateBlueprintError",
    "FilterConfigurationError",
]
