"""Structured logging schema utilities."""

from __future__ import annotations

import datetime as _dt
import json
from typing import Any, Dict, Mapping

from .config import LoggingSettings

SCHEMA_VERSION = 1

REQUIRED_FIELDS = {
    "ts",
    "level",
    "service",
    "env",
    "message",
    "schema_version",
}


def _utc_now() -> str:
    return (
        _dt.datetime.now(tz=_dt.timezone.utc)
        .isoformat(timespec="milliseconds")
        .replace("+00:00", "Z")
    )


def build_log_record(
    *,
    level: str,
    message: str,
    settings: LoggingSettings,
    component: str,
    context: Mapping[str, Any] | None = None,
    **fields: Any,
) -> Dict[str, Any]:
    """Build a structured log record adhering to the canonical schema."""

    record: Dict[str, Any] = {
        "schema_version": SCHEMA_VERSION,
        "ts": _utc_now(),
        "level": level,
        "service": settings.service,
        "env": settings.env,
        "message": message,
        "component": component,
    }

    record.update(fields)

    merged = dict(context or {})
    merged.setdefault("component", component)
    record["context"] = merged

    validate_record(record)
    enforce_payload_limit(record, settings)

    return record


def validate_record(record: Mapping[str, Any]) -> None:
    """Validate a structured log record."""

    missing = REQUIRED_FIELDS.difference(record.keys())

    if missing:
        raise ValueError(f"Log record missing required fields: {sorted(missing)}")

    context = record.get("context", {})

    if context is not None and not isinstance(context, Mapping):
        raise TypeError("record context must be a mapping")


def enforce_payload_limit(record: Dict[str, Any], settings: LoggingSettings) -> None:
    """Drop the context, then flag the record, when it exceeds the byte limit."""

    limit = settings.payload_limit_bytes

    if limit <= 0 or _encoded_size(record) <= limit:
        return

    component = record.get("component")
    record["context"] = {"component": component} if component else {}
    record["context_truncated"] = True

    if _encoded_size(record) <= limit:
        return

    record["payload_truncated"] = True
    for key, value in list(record.items()):
        if key in {"schema_version", "ts", "level", "service", "env", "component"}:
            continue
        if isinstance(value, str) and len(value) > 128:
            record[key] = value[:128] + "..."


def _encoded_size(record: Mapping[str, Any]) -> int:
    return len(json.dumps(record, ensure_ascii=False, default=str).encode("utf-8"))
