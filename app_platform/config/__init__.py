"""Configuration utilities and loaders."""

from .blueprints import BlueprintsConfig, get_blueprints_config

__all__ = [
    "BlueprintsConfig",
    "get_blueprints_config",
]
