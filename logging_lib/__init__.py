"""Public API for the structured logging library."""

from __future__ import annotations

from .config import LoggingSettings, configure_settings, get_settings, load_settings
from .logger import (
    clear_context,
    configure_manager,
    get_logger,
    pop_context,
    push_context,
    reset_loggers,
)

__all__ = [
    "configure",
    "get_logger",
    "LoggingSettings",
    "load_settings",
    "get_settings",
    "push_context",
    "pop_context",
    "clear_context",
    "reset_loggers",
]


def configure(settings: LoggingSettings | None = None, **overrides) -> LoggingSettings:
    """Configure the logging library and its sinks."""

    resolved = configure_settings(settings, **overrides)
    configure_manager(resolved)

    return resolved
