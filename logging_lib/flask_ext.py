"""Flask integration helpers for logging_lib."""

from __future__ import annotations

import time
import uuid
from typing import Any

from flask import Flask, Response, g, request

from .config import get_settings
from .logger import get_logger, pop_context, push_context


def register_flask_context(app: Flask, *, service: str | None = None) -> None:
    """Attach request lifecycle hooks for structured logging.

    Each request gets a request id (taken from the configured header or
    generated), bound into the logging context for the request's duration and
    echoed back on the response. One ``http_request`` record is written per
    completed request.
    """

    settings = get_settings()
    component = service or settings.service
    request_id_header = settings.request_id_header
    exclude_routes = settings.exclude_routes
    logger = get_logger(f"{component}.http")

    def _should_log_route(path: str) -> bool:
        return not any(path.startswith(prefix) for prefix in exclude_routes)

    @app.before_request
    def _logging_before_request() -> None:  # type: ignore[override]
        rid = (request.headers.get(request_id_header) or "").strip()
        if not rid:
            rid = uuid.uuid4().hex[:16]
        g.request_id = rid
        g._logging_start = time.perf_counter()

        g._logging_token = push_context(
            rid=rid,
            method=request.method,
            path=request.path,
            ip=_client_ip(),
        )

    @app.after_request
    def _logging_after_request(response: Response) -> Response:  # type: ignore[override]
        rid = g.get("request_id")
        if rid:
            response.headers.setdefault(request_id_header, rid)

        if _should_log_route(request.path):
            route = request.url_rule.rule if request.url_rule else request.path
            logger.info(
                "http_request",
                route=route,
                method=request.method,
                status=response.status_code,
                lat_ms=_elapsed_ms(g.pop("_logging_start", None)),
                rid=rid,
                context={"user_agent": request.headers.get("User-Agent")},
            )

        return response

    @app.teardown_request
    def _logging_teardown(_exc: Any) -> None:  # type: ignore[override]
        token = g.pop("_logging_token", None)
        if token is not None:
            pop_context(token)

        if _exc is not None and _should_log_route(request.path):
            logger.error(
                "http_exception",
                route=request.path,
                method=request.method,
                rid=g.get("request_id"),
                context={
                    "exception": type(_exc).__name__,
                    "message": str(_exc),
                },
            )


def _client_ip() -> str | None:
    forwarded = request.headers.get("X-Forwarded-For")
    if forwarded:
        return forwarded.split(",")[0].strip()
    return request.remote_addr


def _elapsed_ms(start: float | None) -> float:
    if start is None:
        return 0.0
    return round((time.perf_counter() - start) * 1000.0, 3)
