"""Thread-safe in-memory blueprint store keyed by (author, name)."""

from __future__ import annotations

import logging
import threading
from abc import ABC, abstractmethod
from typing import Dict, Iterable, List, Optional

from domains.blueprints.exceptions import BlueprintNotFoundError, DuplicateBlueprintError
from domains.blueprints.models import Blueprint, BlueprintKey

from .seed import demo_blueprints


logger = logging.getLogger(__name__)


class BlueprintStore(ABC):
    """Storage boundary consumed by :class:`BlueprintCatalog`."""

    @abstractmethod
    def save(self, blueprint: Blueprint) -> None:
        """Insert a new blueprint; raise DuplicateBlueprintError if the key exists."""

    @abstractmethod
    def get(self, author: str, name: str) -> Blueprint:
        """Return the blueprint stored for the key; raise BlueprintNotFoundError if absent."""

    @abstractmethod
    def get_all(self) -> List[Blueprint]:
        """Return a snapshot of every stored blueprint."""

    @abstractmethod
    def get_by_author(self, author: str) -> List[Blueprint]:
        """Return the snapshot subset for an author; raise BlueprintNotFoundError if empty."""

    @abstractmethod
    def update(self, blueprint: Blueprint) -> None:
        """Replace an existing blueprint; raise BlueprintNotFoundError if absent."""


class InMemoryBlueprintStore(BlueprintStore):
    """Dict-backed store guarded by a single lock.

    - save(): insert-if-absent under the lock, so concurrent saves of one key
      yield exactly one winner
    - update(): existence check and replacement under the same lock
    - reads: copy values out under the lock; callers get independent snapshots

    Values are copied on the way in and on the way out, so no caller ever
    holds a reference to a stored blueprint. Snapshots are sorted by key.
    """

    def __init__(self, initial: Optional[Iterable[Blueprint]] = None, *, seed: bool = True) -> None:
        self._data: Dict[BlueprintKey, Blueprint] = {}
        self._lock = threading.RLock()

        if seed:
            initial = list(initial or []) + demo_blueprints()

        for blueprint in initial or []:
            self.save(blueprint)

        logger.info("Blueprint store initialized with %d entries", len(self._data))

    def save(self, blueprint: Blueprint) -> None:
        key = BlueprintKey.of(blueprint)
        value = blueprint.copy()

        with self._lock:
            if key in self._data:
                logger.debug("Rejected duplicate blueprint %s", key)
                raise DuplicateBlueprintError(f"The given blueprint already exists: {key}")
            self._data[key] = value

        logger.debug("Saved blueprint %s", key)

    def get(self, author: str, name: str) -> Blueprint:
        key = BlueprintKey(author, name)

        with self._lock:
            stored = self._data.get(key)
            result = stored.copy() if stored is not None else None

        if result is None:
            raise BlueprintNotFoundError(f"Blueprint not found: {key}")
        return result

    def get_all(self) -> List[Blueprint]:
        with self._lock:
            return [self._data[key].copy() for key in sorted(self._data)]

    def get_by_author(self, author: str) -> List[Blueprint]:
        with self._lock:
            matches = [self._data[key].copy() for key in sorted(self._data) if key.author == author]

        if not matches:
            raise BlueprintNotFoundError(f"No blueprints found for author: {author}")
        return matches

    def update(self, blueprint: Blueprint) -> None:
        key = BlueprintKey.of(blueprint)
        value = blueprint.copy()

        with self._lock:
            if key not in self._data:
                raise BlueprintNotFoundError(f"Blueprint not found: {key}")
            self._data[key] = value

        logger.debug("Replaced blueprint %s", key)

    def __len__(self) -> int:
        with self._lock:
            return len(self._data)
