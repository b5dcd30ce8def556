"""Read-path blueprint filters.

Pure point-sequence transforms applied to every blueprint leaving the catalog:

- RedundancyFilter: collapses runs of consecutive equal points
- SubsamplingFilter: keeps every point at an even zero-based position

Filters hold no state, never mutate their argument and never touch the store,
so one instance is shared by every request thread.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Dict, List, Optional, Type

from domains.blueprints.exceptions import FilterConfigurationError
from domains.blueprints.models import Blueprint, Point

logger = logging.getLogger(__name__)


class BlueprintFilter(ABC):
    """Strategy interface for read-path transforms."""

    name: str = "base"

    def apply(self, blueprint: Optional[Blueprint]) -> Optional[Blueprint]:
        """Return a new blueprint with transformed points.

        ``None`` passes through. Blueprints whose points are ``None`` or empty
        come back as an unchanged copy.
        """

        if blueprint is None:
            return None
        if not blueprint.points:
            return blueprint.copy()

        points = self.transform(list(blueprint.points))
        return Blueprint(blueprint.author, blueprint.name, points)

    @abstractmethod
    def transform(self, points: List[Point]) -> List[Point]:
        """Map a non-empty point list to a new list."""

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}()"


class RedundancyFilter(BlueprintFilter):
    """Drops a point when it equals its immediate predecessor.

    Only adjacent repeats collapse; a point equal to an earlier, non-adjacent
    one is kept. The first point always survives.
    """

    name = "redundancy"

    def transform(self, points: List[Point]) -> List[Point]:
        kept = [points[0]]
        for previous, current in zip(points, points[1:]):
            if current != previous:
                kept.append(current)
        return kept


class SubsamplingFilter(BlueprintFilter):
    """Keeps points at positions 0, 2, 4, ... (ceil(n/2) points)."""

    name = "subsampling"

    def transform(self, points: List[Point]) -> List[Point]:
        return points[::2]


FILTERS: Dict[str, Type[BlueprintFilter]] = {
    RedundancyFilter.name: RedundancyFilter,
    SubsamplingFilter.name: SubsamplingFilter,
}

DEFAULT_FILTER = SubsamplingFilter.name


def available_filters() -> List[str]:
    return sorted(FILTERS)


def build_filter(name: Optional[str] = None) -> BlueprintFilter:
    """Instantiate the filter registered under ``name``.

    Raises:
        FilterConfigurationError: if no filter is registered under that name.
    """

    kind = (name or DEFAULT_FILTER).strip().lower()
    filter_cls = FILTERS.get(kind)

    if filter_cls is None:
        raise FilterConfigurationError(
            f"Unknown blueprint filter '{name}'; expected one of {', '.join(available_filters())}"
        )

    logger.info("Selected blueprint filter %s", kind)
    return filter_cls()
