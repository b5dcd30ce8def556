"""Blueprint endpoints."""

from __future__ import annotations

import time

from flask import Blueprint, current_app, jsonify, request

from application.blueprints import BlueprintCatalog
from domains.blueprints.exceptions import BlueprintValidationError
from domains.blueprints.serializers import blueprint_from_dict, blueprint_to_dict
from logging_lib import get_logger as get_structured_logger


blueprints_bp = Blueprint("blueprints", __name__)

logger = get_structured_logger("api.http.blueprints")


def _catalog() -> BlueprintCatalog:
    return current_app.config["BLUEPRINTS_RUNTIME"].catalog


def _payload():
    data = request.get_json(silent=True)
    if data is None:
        raise BlueprintValidationError("Request body must be a JSON blueprint")
    return blueprint_from_dict(data)


@blueprints_bp.route("/blueprints", methods=["GET"])
def list_blueprints():
    """List every blueprint (filtered)."""

    blueprints = _catalog().get_all_blueprints()
    logger.debug("Listed blueprints", count=len(blueprints))

    return jsonify([blueprint_to_dict(bp) for bp in blueprints]), 200


@blueprints_bp.route("/blueprints/<author>", methods=["GET"])
def list_blueprints_by_author(author: str):
    """List an author's blueprints; 404 when the author has none."""

    blueprints = _catalog().get_blueprints_by_author(author)
    logger.debug("Listed blueprints by author", author=author, count=len(blueprints))

    return jsonify([blueprint_to_dict(bp) for bp in blueprints]), 200


@blueprints_bp.route("/blueprints/<author>/<name>", methods=["GET"])
def get_blueprint(author: str, name: str):
    """Fetch one blueprint (filtered)."""

    blueprint = _catalog().get_blueprint(author, name)

    return jsonify(blueprint_to_dict(blueprint)), 200


@blueprints_bp.route("/blueprints", methods=["POST"])
def create_blueprint():
    """Register a new blueprint; 403 when the key is taken."""

    blueprint = _payload()
    _catalog().add_new(blueprint)

    logger.info("Blueprint created", author=blueprint.author, name=blueprint.name)

    return jsonify({"author": blueprint.author, "name": blueprint.name}), 201


@blueprints_bp.route("/blueprints/<author>/<name>", methods=["PUT"])
def update_blueprint(author: str, name: str):
    """Replace an existing blueprint.

    The payload's author/name must match the path; a mismatch is rejected
    before the catalog is consulted.
    """

    blueprint = _payload()

    if blueprint.author != author or blueprint.name != name:
        logger.warning(
            "Blueprint key mismatch",
            path_key=f"{author}/{name}",
            payload_key=f"{blueprint.author}/{blueprint.name}",
        )
        raise BlueprintValidationError("Blueprint author/name mismatch with URL path")

    _catalog().update_blueprint(blueprint)

    logger.info("Blueprint updated", author=author, name=name)

    return jsonify({"author": author, "name": name}), 202


@blueprints_bp.route("/healthz")
def healthz():
    """Liveness probe."""

    runtime = current_app.config["BLUEPRINTS_RUNTIME"]
    return (
        jsonify({
            "status": "ok",
            "filter": runtime.blueprint_filter.name,
            "timestamp": time.time(),
        }),
        200,
    )
