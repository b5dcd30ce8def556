"""Sink protocol shared by the logging manager and sink implementations."""

from __future__ import annotations

from typing import Any, Mapping, Protocol


class Sink(Protocol):
    """Destination for fully built log records."""

    def emit(self, record: Mapping[str, Any]) -> None: ...

    def close(self) -> None: ...
