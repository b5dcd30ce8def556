"""Unit tests for the blueprint catalog (store + active filter)."""

from __future__ import annotations

from unittest.mock import Mock

import pytest

from application.blueprints import BlueprintCatalog, RedundancyFilter, SubsamplingFilter
from domains.blueprints.exceptions import BlueprintNotFoundError, DuplicateBlueprintError
from domains.blueprints.models import Blueprint
from tests.utils.assertions import assert_keys, assert_points


@pytest.fixture
def subsampling_catalog(seeded_store) -> BlueprintCatalog:
    return BlueprintCatalog(seeded_store, SubsamplingFilter())


@pytest.fixture
def redundancy_catalog(empty_store) -> BlueprintCatalog:
    return BlueprintCatalog(empty_store, RedundancyFilter())


def test_get_by_author_returns_both_john_designs_filtered(subsampling_catalog, seeded_store):
    result = subsampling_catalog.get_blueprints_by_author("john")

    assert_keys(result, [("john", "house_design"), ("john", "office_design")])
    for bp in result:
        raw = seeded_store.get(bp.author, bp.name)
        assert bp.points == raw.points[::2]


def test_get_blueprint_is_filtered(redundancy_catalog):
    redundancy_catalog.add_new(Blueprint.from_pairs("ana", "k", [(1, 1), (1, 1), (2, 2)]))
    assert_points(redundancy_catalog.get_blueprint("ana", "k"), [(1, 1), (2, 2)])


def test_get_all_filters_every_member(subsampling_catalog, seeded_store):
    raw = {(bp.author, bp.name): bp for bp in seeded_store.get_all()}
    result = subsampling_catalog.get_all_blueprints()

    assert len(result) == len(raw)
    for bp in result:
        assert bp.points == raw[(bp.author, bp.name)].points[::2]


def test_writes_are_stored_unfiltered(redundancy_catalog, empty_store):
    redundancy_catalog.add_new(Blueprint.from_pairs("ana", "k", [(1, 1), (1, 1)]))
    assert_points(empty_store.get("ana", "k"), [(1, 1), (1, 1)])

    redundancy_catalog.update_blueprint(Blueprint.from_pairs("ana", "k", [(3, 3), (3, 3), (4, 4)]))
    assert_points(empty_store.get("ana", "k"), [(3, 3), (3, 3), (4, 4)])


def test_reads_do_not_alter_stored_values(subsampling_catalog, seeded_store):
    before = seeded_store.get("maria", "park_design")
    subsampling_catalog.get_blueprint("maria", "park_design")
    subsampling_catalog.get_all_blueprints()
    assert seeded_store.get("maria", "park_design") == before


def test_duplicate_propagates_unchanged(subsampling_catalog):
    with pytest.raises(DuplicateBlueprintError):
        subsampling_catalog.add_new(Blueprint.from_pairs("john", "house_design", [(0, 0)]))


@pytest.mark.parametrize(
    "call",
    [
        lambda c: c.get_blueprint("ghost", "none"),
        lambda c: c.get_blueprints_by_author("ghost"),
        lambda c: c.update_blueprint(Blueprint("ghost", "none")),
    ],
    ids=["get_blueprint", "get_by_author", "update"],
)
def test_not_found_propagates_unchanged(subsampling_catalog, call):
    with pytest.raises(BlueprintNotFoundError):
        call(subsampling_catalog)


def test_get_all_on_empty_store_is_empty(redundancy_catalog):
    assert redundancy_catalog.get_all_blueprints() == []


def test_store_errors_are_not_wrapped():
    store = Mock()
    error = BlueprintNotFoundError("boom")
    store.get.side_effect = error
    catalog = BlueprintCatalog(store, SubsamplingFilter())

    with pytest.raises(BlueprintNotFoundError) as excinfo:
        catalog.get_blueprint("a", "b")

    assert excinfo.value is error


def test_active_filter_is_exposed():
    f = RedundancyFilter()
    assert BlueprintCatalog(Mock(), f).active_filter is f
