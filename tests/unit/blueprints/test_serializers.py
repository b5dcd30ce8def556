"""Unit tests for blueprint payload serializers."""

from __future__ import annotations

import pytest

from domains.blueprints.exceptions import BlueprintValidationError
from domains.blueprints.models import Blueprint, Point
from domains.blueprints.serializers import (
    blueprint_from_dict,
    blueprint_to_dict,
    point_from_dict,
)
from tests.utils.assertions import assert_equals, assert_points


def test_blueprint_to_dict_shape():
    bp = Blueprint.from_pairs("john", "house", [(1, 2), (3, 4)])

    assert_equals(
        blueprint_to_dict(bp),
        {"author": "john", "name": "house", "points": [{"x": 1, "y": 2}, {"x": 3, "y": 4}]},
    )


def test_blueprint_to_dict_with_none_points():
    assert blueprint_to_dict(Blueprint("a", "b", None))["points"] == []


def test_blueprint_from_dict_parses_points_in_order():
    bp = blueprint_from_dict({"author": "a", "name": "b", "points": [{"x": 5, "y": 6}, {"x": 1, "y": 0}]})

    assert (bp.author, bp.name) == ("a", "b")
    assert_points(bp, [(5, 6), (1, 0)])


@pytest.mark.parametrize("points", [None, []])
def test_blueprint_from_dict_missing_points_means_empty(points):
    payload = {"author": "a", "name": "b"}
    if points is not None:
        payload["points"] = points
    assert blueprint_from_dict(payload).points == []


@pytest.mark.parametrize(
    "payload",
    [
        None,
        [],
        "blueprint",
        {"name": "b"},
        {"author": "", "name": "b"},
        {"author": "a"},
        {"author": "a", "name": 7},
        {"author": "a", "name": "b", "points": {"x": 1, "y": 1}},
        {"author": "a", "name": "b", "points": [[1, 1]]},
        {"author": "a", "name": "b", "points": [{"x": "1", "y": 1}]},
        {"author": "a", "name": "b", "points": [{"x": 1}]},
        {"author": "a", "name": "b", "points": [{"x": True, "y": 1}]},
    ],
)
def test_blueprint_from_dict_rejects_malformed_payloads(payload):
    with pytest.raises(BlueprintValidationError):
        blueprint_from_dict(payload)


def test_point_from_dict():
    assert point_from_dict({"x": -3, "y": 7}) == Point(-3, 7)
