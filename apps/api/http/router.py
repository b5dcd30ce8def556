"""Central route registration for the blueprints API app."""

from __future__ import annotations

from flask import Flask

from logging_lib import get_logger as get_structured_logger

from .blueprint_routes import blueprints_bp


def register_routes(app: Flask) -> None:
    """Register the routes for the API."""

    logger = get_structured_logger("api.http.router")

    app.register_blueprint(blueprints_bp)
    logger.debug("Registered blueprints blueprint")
