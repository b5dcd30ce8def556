"""Blueprint catalog: the single integration point over store and filter."""

from __future__ import annotations

import logging
from typing import List

from adapters.db.memory.blueprint_store import BlueprintStore
from domains.blueprints.models import Blueprint

from .filters import BlueprintFilter

logger = logging.getLogger(__name__)


class BlueprintCatalog:
    """Delegates writes to the store and filters every read.

    Store errors (BlueprintNotFoundError, DuplicateBlueprintError) propagate
    unchanged. The filter is fixed at construction.
    """

    def __init__(self, store: BlueprintStore, blueprint_filter: BlueprintFilter) -> None:
        self._store = store
        self._filter = blueprint_filter

    @property
    def active_filter(self) -> BlueprintFilter:
        return self._filter

    def add_new(self, blueprint: Blueprint) -> None:
        """Register a new blueprint (unfiltered)."""

        self._store.save(blueprint)
        logger.info("Registered blueprint %s/%s", blueprint.author, blueprint.name)

    def get_blueprint(self, author: str, name: str) -> Blueprint:
        return self._filter.apply(self._store.get(author, name))

    def get_all_blueprints(self) -> List[Blueprint]:
        return [self._filter.apply(bp) for bp in self._store.get_all()]

    def get_blueprints_by_author(self, author: str) -> List[Blueprint]:
        return [self._filter.apply(bp) for bp in self._store.get_by_author(author)]

    def update_blueprint(self, blueprint: Blueprint) -> None:
        """Replace an existing blueprint wholesale (unfiltered)."""

        self._store.update(blueprint)
        logger.info("Updated blueprint %s/%s", blueprint.author, blueprint.name)
