"""Blueprint application services."""

from .catalog import BlueprintCatalog
from .filters import (
    DEFAULT_FILTER,
    FILTERS,
    BlueprintFilter,
    RedundancyFilter,
    SubsamplingFilter,
    available_filters,
    build_filter,
)

__all__ = [
    "BlueprintCatalog",
    "BlueprintFilter",
    "RedundancyFilter",
    "SubsamplingFilter",
    "FILTERS",
    "DEFAULT_FILTER",
    "available_filters",
    "build_filter",
]
