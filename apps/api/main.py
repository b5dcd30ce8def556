#!/usr/bin/env python3
"""
Blueprints API: Flask composition root.

Responsibilities:
- Configure structured logging and request context
- Assemble the runtime (store, active filter, catalog) once per app
- Register HTTP routes and error handlers

All runtime state lives on the Flask app (``app.config["BLUEPRINTS_RUNTIME"]``);
there are no module-level singletons, so several apps (e.g. one per test)
can coexist in a process.
"""

from __future__ import annotations

import logging
from typing import Optional

from flask import Flask
from flask_cors import CORS

from app_platform.config.blueprints import BlueprintsConfig
from app_platform.errors.api import register_error_handlers
from apps.api.bootstrap import BlueprintsRuntime, build_runtime, load_config
from apps.api.http import register_routes
from logging_lib import configure as configure_structured_logging, get_logger as get_structured_logger
from logging_lib.flask_ext import register_flask_context

logger = get_structured_logger("api.main")


def create_app(config: Optional[BlueprintsConfig] = None, *, runtime: Optional[BlueprintsRuntime] = None) -> Flask:
    """Construct the blueprints Flask application.

    Parameters
    ----------
    config:
        Optional configuration; loaded from the environment when omitted.
    runtime:
        Optional pre-built runtime, used by tests to inject a store.
    """

    if runtime is None:
        runtime = build_runtime(config if config is not None else load_config())

    app = Flask(__name__)
    CORS(app, send_wildcard=True)
    app.config["BLUEPRINTS_RUNTIME"] = runtime

    register_flask_context(app, service="blueprints")
    register_error_handlers(app)
    register_routes(app)

    logger.info("Blueprints application created", filter=runtime.blueprint_filter.name)

    return app


def main() -> None:  # pragma: no cover - CLI entrypoint
    logging.basicConfig(level=logging.INFO)
    cfg = load_config()
    configure_structured_logging(service="blueprints", env=cfg.env)
    get_structured_logger("api.bootstrap").info("blueprints service starting")

    app = create_app(cfg)
    app.run(host=cfg.host, port=cfg.port, threaded=True)


if __name__ == "__main__":  # pragma: no cover
    main()
