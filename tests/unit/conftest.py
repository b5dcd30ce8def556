"""Common lightweight fixtures shared across unit test suites."""

from __future__ import annotations

import random
from typing import Callable, Generator

import pytest

from adapters.db.memory import InMemoryBlueprintStore
from domains.blueprints.models import Blueprint
from logging_lib.config import reset_settings
from logging_lib.logger import clear_context, reset_loggers


@pytest.fixture(autouse=True)
def deterministic_random_seed() -> Generator[None, None, None]:
    """Keep Python's RNG deterministic so flaky tests surface quickly."""

    state = random.getstate()
    random.seed(1337)
    yield
    random.setstate(state)


@pytest.fixture(autouse=True)
def _quiet_structured_logging(monkeypatch: pytest.MonkeyPatch) -> Generator[None, None, None]:
    """Route structured logs to memory so test output stays clean."""

    monkeypatch.setenv("LOG_SINKS", "memory")
    monkeypatch.setenv("LOG_LEVEL", "DEBUG")
    reset_settings()
    reset_loggers()
    yield
    clear_context()
    reset_loggers()
    reset_settings()


@pytest.fixture
def make_blueprint() -> Callable[..., Blueprint]:
    """Factory building blueprints from ``(x, y)`` pairs."""

    def _make(author: str = "ana", name: str = "plan", pairs=((0, 0), (1, 1))) -> Blueprint:
        return Blueprint.from_pairs(author, name, pairs)

    return _make


@pytest.fixture
def empty_store() -> InMemoryBlueprintStore:
    return InMemoryBlueprintStore(seed=False)


@pytest.fixture
def seeded_store() -> InMemoryBlueprintStore:
    return InMemoryBlueprintStore()
