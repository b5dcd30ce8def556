"""Blueprints service configuration."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import List

from application.blueprints.filters import DEFAULT_FILTER, available_filters

logger = logging.getLogger(__name__)


def _bool_env(value: str | None, default: bool) -> bool:
    if value is None:
        return default
    return value.strip().lower() in {"1", "true", "yes", "on"}


def _int_env(value: str | None, default: int) -> int:
    if value is None:
        return default
    try:
        return int(value)
    except (TypeError, ValueError):
        logger.warning("Ignoring non-integer value %r, using %d", value, default)
        return default


@dataclass
class BlueprintsConfig:
    """Process-wide settings, fixed at startup."""

    # Read-path filter; one of available_filters()
    filter_name: str = DEFAULT_FILTER

    # Load the demo dataset into a fresh store
    seed_enabled: bool = True

    # Development server
    host: str = "127.0.0.1"
    port: int = 8080
    env: str = "local"

    def __post_init__(self) -> None:
        self.filter_name = (self.filter_name or DEFAULT_FILTER).strip().lower()

    @classmethod
    def from_env(cls) -> "BlueprintsConfig":
        """Load configuration from environment variables."""

        logger.info("Loading blueprints configuration from environment variables")
        return cls(
            filter_name=os.getenv("BLUEPRINTS_FILTER", DEFAULT_FILTER),
            seed_enabled=_bool_env(os.getenv("BLUEPRINTS_SEED"), True),
            host=os.getenv("BLUEPRINTS_HOST", "127.0.0.1"),
            port=_int_env(os.getenv("BLUEPRINTS_PORT"), 8080),
            env=os.getenv("BLUEPRINTS_ENV", "local"),
        )

    def validate(self) -> List[str]:
        """Return a list of configuration problems (empty when valid)."""

        errors: List[str] = []

        if self.filter_name not in available_filters():
            errors.append(
                f"filter_name must be one of {', '.join(available_filters())}, got '{self.filter_name}'"
            )

        if not 0 < self.port < 65536:
            errors.append(f"port must be between 1 and 65535, got {self.port}")

        return errors


def get_blueprints_config() -> BlueprintsConfig:
    return BlueprintsConfig.from_env()
