"""Fixtures for API unit tests."""

from __future__ import annotations

import pytest

from app_platform.config.blueprints import BlueprintsConfig
from apps.api.bootstrap import build_runtime
from apps.api.main import create_app
from logging_lib.logger import get_manager
from logging_lib.sinks import InMemorySink


@pytest.fixture
def api_config() -> BlueprintsConfig:
    return BlueprintsConfig(filter_name="subsampling", seed_enabled=True)


@pytest.fixture
def runtime(api_config):
    return build_runtime(api_config)


@pytest.fixture
def app(runtime):
    app = create_app(runtime=runtime)
    app.config.update(TESTING=True)
    return app


@pytest.fixture
def client(app):
    with app.test_client() as c:
        yield c


@pytest.fixture
def memory_sink() -> InMemorySink:
    sinks = [s for s in get_manager().sinks if isinstance(s, InMemorySink)]
    if not sinks:
        pytest.fail("Expected an InMemorySink to be configured for API tests")
    return sinks[0]
