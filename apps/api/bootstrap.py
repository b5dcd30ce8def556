"""API application bootstrap wiring.

Builds the store, the configured filter and the catalog. The filter is chosen
here once per process and never swapped afterwards.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from adapters.db.memory import BlueprintStore, InMemoryBlueprintStore
from app_platform.config.blueprints import BlueprintsConfig, get_blueprints_config
from application.blueprints import BlueprintCatalog, BlueprintFilter, build_filter
from domains.blueprints.exceptions import BlueprintConfigurationError
from logging_lib import get_logger as get_structured_logger

logger = get_structured_logger("api.bootstrap")


@dataclass(slots=True)
class BlueprintsRuntime:
    """Container for the API runtime dependencies."""

    config: BlueprintsConfig
    store: BlueprintStore
    blueprint_filter: BlueprintFilter
    catalog: BlueprintCatalog


def load_config() -> BlueprintsConfig:
    return get_blueprints_config()


def build_runtime(cfg: Optional[BlueprintsConfig] = None, *, store: Optional[BlueprintStore] = None) -> BlueprintsRuntime:
    """Assemble store + filter + catalog from configuration.

    Raises:
        BlueprintConfigurationError: when the configuration is invalid.
    """

    cfg = cfg if cfg is not None else load_config()

    problems = cfg.validate()
    if problems:
        logger.error("Invalid blueprints configuration", problems=problems)
        raise BlueprintConfigurationError("; ".join(problems))

    if store is None:
        store = InMemoryBlueprintStore(seed=cfg.seed_enabled)

    blueprint_filter = build_filter(cfg.filter_name)
    catalog = BlueprintCatalog(store, blueprint_filter)

    logger.info(
        "Blueprints runtime assembled",
        filter=blueprint_filter.name,
        seed_enabled=cfg.seed_enabled,
    )

    return BlueprintsRuntime(
        config=cfg,
        store=store,
        blueprint_filter=blueprint_filter,
        catalog=catalog,
    )
