"""In-memory sink used by tests and local debugging."""

from __future__ import annotations

import threading
from typing import Any, Dict, List, Mapping


class InMemorySink:
    """Collect records in a list."""

    def __init__(self) -> None:
        self.records: List[Dict[str, Any]] = []
        self._lock = threading.Lock()

    def emit(self, record: Mapping[str, Any]) -> None:
        with self._lock:
            self.records.append(dict(record))

    def messages(self) -> List[str]:
        with self._lock:
            return [str(r.get("message")) for r in self.records]

    def close(self) -> None:
        return None
