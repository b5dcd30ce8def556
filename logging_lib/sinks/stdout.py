"""JSON-lines sink writing to standard output."""

from __future__ import annotations

import json
import sys
import threading
from typing import Any, Mapping, TextIO


class StdoutSink:
    """Write one JSON document per record."""

    def __init__(self, stream: TextIO | None = None) -> None:
        self._stream = stream
        self._lock = threading.Lock()

    def emit(self, record: Mapping[str, Any]) -> None:
        line = json.dumps(record, ensure_ascii=False, default=str)
        stream = self._stream or sys.stdout
        # one writer at a time so lines from request threads never interleave
        with self._lock:
            stream.write(line + "\n")
            stream.flush()

    def close(self) -> None:
        return None
