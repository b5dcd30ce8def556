"""Serialization helpers for blueprint domain models.

These helpers convert domain dataclasses to and from JSON-ready payloads. They
live outside the dataclasses so the models stay free of transport concerns.
"""

from __future__ import annotations

import logging
from typing import Any, Mapping

from .exceptions import BlueprintValidationError
from .models import Blueprint, Point

logger = logging.getLogger(__name__)


def point_to_dict(point: Point) -> dict[str, int]:
    return {"x": point.x, "y": point.y}


def point_from_dict(data: Any) -> Point:
    """Create a :class:`Point` from a ``{"x": int, "y": int}`` mapping."""

    if not isinstance(data, Mapping):
        raise BlueprintValidationError("Each point must be an object with 'x' and 'y'")

    x = _coerce_coordinate(data.get("x"), "x")
    y = _coerce_coordinate(data.get("y"), "y")
    return Point(x, y)


def blueprint_to_dict(blueprint: Blueprint) -> dict[str, Any]:
    """Convert a :class:`Blueprint` into a JSON-ready dictionary."""

    logger.debug("Serializing blueprint %s/%s", blueprint.author, blueprint.name)
    points = blueprint.points or []
    return {
        "author": blueprint.author,
        "name": blueprint.name,
        "points": [point_to_dict(p) for p in points],
    }


def blueprint_from_dict(data: Any) -> Blueprint:
    """Create a :class:`Blueprint` from a request payload.

    Raises:
        BlueprintValidationError: when author/name are missing or not strings,
            or when ``points`` is not a list of valid points.
    """

    if not isinstance(data, Mapping):
        raise BlueprintValidationError("Blueprint payload must be a JSON object")

    author = data.get("author")
    name = data.get("name")
    if not isinstance(author, str) or not author:
        raise BlueprintValidationError("Field 'author' is required and must be a non-empty string")
    if not isinstance(name, str) or not name:
        raise BlueprintValidationError("Field 'name' is required and must be a non-empty string")

    raw_points = data.get("points", [])
    if raw_points is None:
        raw_points = []
    if not isinstance(raw_points, list):
        raise BlueprintValidationError("Field 'points' must be a list")

    logger.debug("Deserializing blueprint %s/%s with %d points", author, name, len(raw_points))
    return Blueprint(author, name, [point_from_dict(p) for p in raw_points])


def _coerce_coordinate(value: Any, field_name: str) -> int:
    # bool is an int subclass; reject it explicitly
    if isinstance(value, bool) or not isinstance(value, int):
        raise BlueprintValidationError(f"Point field '{field_name}' must be an integer")
    return value
