from __future__ import annotations

import pytest

from adapters.db.memory import InMemoryBlueprintStore
from app_platform.config.blueprints import BlueprintsConfig
from application.blueprints import RedundancyFilter, SubsamplingFilter
from apps.api.bootstrap import build_runtime
from domains.blueprints.exceptions import BlueprintConfigurationError, FilterConfigurationError


def test_build_runtime_defaults():
    runtime = build_runtime(BlueprintsConfig())

    assert isinstance(runtime.blueprint_filter, SubsamplingFilter)
    assert runtime.catalog.active_filter is runtime.blueprint_filter
    assert len(runtime.store) == 5


def test_build_runtime_respects_filter_and_seed():
    runtime = build_runtime(BlueprintsConfig(filter_name="redundancy", seed_enabled=False))

    assert isinstance(runtime.blueprint_filter, RedundancyFilter)
    assert len(runtime.store) == 0


def test_build_runtime_uses_injected_store():
    store = InMemoryBlueprintStore(seed=False)
    runtime = build_runtime(BlueprintsConfig(), store=store)

    assert runtime.store is store


def test_build_runtime_rejects_unknown_filter():
    with pytest.raises(BlueprintConfigurationError) as excinfo:
        build_runtime(BlueprintsConfig(filter_name="blur"))

    assert "filter_name" in str(excinfo.value)
    assert excinfo.value.error_code == "CONFIGURATION_ERROR"


def test_build_runtime_rejects_bad_port_with_general_error():
    with pytest.raises(BlueprintConfigurationError) as excinfo:
        build_runtime(BlueprintsConfig(port=0))

    assert not isinstance(excinfo.value, FilterConfigurationError)
    assert "port" in str(excinfo.value)


def test_build_runtime_accepts_mixed_case_filter():
    runtime = build_runtime(BlueprintsConfig(filter_name=" Redundancy ", seed_enabled=False))

    assert isinstance(runtime.blueprint_filter, RedundancyFilter)


def test_build_runtime_loads_env(monkeypatch):
    monkeypatch.setenv("BLUEPRINTS_FILTER", "redundancy")
    monkeypatch.setenv("BLUEPRINTS_SEED", "false")

    runtime = build_runtime()

    assert runtime.blueprint_filter.name == "redundancy"
    assert len(runtime.store) == 0
