"""Blueprint domain models.

Pure value types shared by the store, the filters and the HTTP adapter. No
persistence or transport concerns live here.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, List, Optional


@dataclass(frozen=True, order=True)
class Point:
    """Immutable 2D integer coordinate."""

    x: int
    y: int

    def __str__(self) -> str:
        return f"({self.x}, {self.y})"


@dataclass(frozen=True, order=True)
class BlueprintKey:
    """Composite (author, name) lookup key.

    Matching is exact and case-sensitive; no trimming is applied.
    """

    author: str
    name: str

    @classmethod
    def of(cls, blueprint: "Blueprint") -> "BlueprintKey":
        return cls(blueprint.author, blueprint.name)

    def __str__(self) -> str:
        return f"{self.author}/{self.name}"


@dataclass(eq=False)
class Blueprint:
    """A named, authored, ordered sequence of points.

    Two blueprints are equal when author, name and every point (in order)
    match. The hash only covers the key, so blueprints that share a key but
    differ in points collide without comparing equal.
    """

    author: str
    name: str
    points: Optional[List[Point]] = field(default_factory=list)

    @classmethod
    def from_pairs(cls, author: str, name: str, pairs: Iterable[tuple[int, int]]) -> "Blueprint":
        """Build a blueprint from plain ``(x, y)`` tuples."""

        return cls(author, name, [Point(x, y) for x, y in pairs])

    @property
    def key(self) -> BlueprintKey:
        return BlueprintKey(self.author, self.name)

    def add_point(self, point: Point) -> None:
        """Append a point to the drawing path."""

        if self.points is None:
            self.points = []
        self.points.append(point)

    def copy(self) -> "Blueprint":
        """Return a copy that shares no mutable state with this blueprint."""

        points = None if self.points is None else list(self.points)
        return Blueprint(self.author, self.name, points)

    def __eq__(self, other: object) -> bool:
        if self is other:
            return True
        if not isinstance(other, Blueprint):
            return NotImplemented
        if self.author != other.author or self.name != other.name:
            return False

        mine = self.points or []
        theirs = other.points or []
        if len(mine) != len(theirs):
            return False
        return all(a == b for a, b in zip(mine, theirs))

    def __hash__(self) -> int:
        return hash((self.author, self.name))
