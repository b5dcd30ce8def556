"""Configuration utilities for the logging library."""

from __future__ import annotations

import os
import threading
from dataclasses import dataclass, field, replace
from typing import Any, Mapping


LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def _comma_tuple(value: str | None, *, default: tuple[str, ...]) -> tuple[str, ...]:
    """Convert a comma-separated string to a tuple."""

    if not value:
        return default

    return tuple(filter(None, (part.strip() for part in value.split(","))))


def _int_env(value: str | None, default: int) -> int:
    if value is None:
        return default

    try:
        return int(value)
    except (TypeError, ValueError):
        return default


def _level(value: str | None, default: str) -> str:
    level = (value or default).strip().upper()
    return level if level in LEVELS else default


@dataclass(frozen=True)
class LoggingSettings:
    """Immutable runtime configuration."""

    service: str
    env: str
    level: str
    sinks: tuple[str, ...]
    request_id_header: str = "X-Request-Id"
    exclude_routes: tuple[str, ...] = ()
    payload_limit_bytes: int = 16_384
    default_context: Mapping[str, Any] = field(default_factory=dict)

    def with_overrides(self, **kwargs: Any) -> "LoggingSettings":
        return replace(self, **kwargs)


_SETTINGS_LOCK = threading.RLock()
_SETTINGS: LoggingSettings | None = None


def load_settings(env: Mapping[str, str] | None = None) -> LoggingSettings:
    source = os.environ if env is None else env

    return LoggingSettings(
        service=source.get("LOG_SERVICE_NAME", "blueprints"),
        env=source.get("LOG_ENV", "local"),
        level=_level(source.get("LOG_LEVEL"), "INFO"),
        sinks=_comma_tuple(source.get("LOG_SINKS"), default=("stdout",)),
        request_id_header=source.get("LOG_REQUEST_ID_HEADER", "X-Request-Id"),
        exclude_routes=_comma_tuple(source.get("LOG_EXCLUDE_ROUTES"), default=("/healthz",)),
        payload_limit_bytes=_int_env(source.get("LOG_PAYLOAD_LIMIT_BYTES"), 16_384),
        default_context={},
    )


def configure_settings(
    settings: LoggingSettings | None = None, **overrides: Any
) -> LoggingSettings:
    with _SETTINGS_LOCK:
        resolved = settings or load_settings()
        if overrides:
            resolved = resolved.with_overrides(**overrides)
        global _SETTINGS
        _SETTINGS = resolved
        return _SETTINGS


def get_settings() -> LoggingSettings:
    with _SETTINGS_LOCK:
        if _SETTINGS is None:
            return configure_settings()
        return _SETTINGS


def reset_settings() -> None:
    global _SETTINGS
    with _SETTINGS_LOCK:
        _SETTINGS = None
