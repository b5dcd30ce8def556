"""Fixtures for logging library unit tests."""

from __future__ import annotations

import pytest

from logging_lib.config import LoggingSettings
from logging_lib.logger import LoggerManager
from logging_lib.sinks import InMemorySink


@pytest.fixture
def logging_settings() -> LoggingSettings:
    """Settings routed to an in-memory sink."""

    return LoggingSettings(
        service="blueprints-test",
        env="test",
        level="DEBUG",
        sinks=("memory",),
        exclude_routes=("/healthz",),
    )


@pytest.fixture
def logger_manager(logging_settings) -> LoggerManager:
    manager = LoggerManager()
    manager.configure(logging_settings)
    yield manager
    manager.reset()


@pytest.fixture
def memory_sink(logger_manager) -> InMemorySink:
    sink = logger_manager.sinks[0]
    assert isinstance(sink, InMemorySink)
    return sink


@pytest.fixture
def memory_logger(logger_manager):
    return logger_manager.get_logger("memory-test")
