"""Central API error codes and registration helpers."""

from __future__ import annotations

from typing import Any, Dict

from flask import jsonify
from werkzeug.exceptions import HTTPException

from domains.blueprints.exceptions import BlueprintError
from logging_lib import get_logger as get_structured_logger

logger = get_structured_logger("api.errors")


ERRORS: Dict[str, int] = {
    'MISSING_FIELDS': 400,
    'INVALID_ARGUMENT': 400,
    'VALIDATION_ERROR': 400,
    'ALREADY_EXISTS': 403,
    'NOT_FOUND': 404,
    'METHOD_NOT_ALLOWED': 405,
    'CONFIGURATION_ERROR': 500,
    'INTERNAL_ERROR': 500,
}


def make_error(message: str, code: str) -> Any:
    """Make an error response."""

    status = ERRORS.get(code, 500)
    payload = {'error': message, 'code': code}

    return jsonify(payload), status


def register_error_handlers(app) -> None:
    """Register error handlers."""

    @app.errorhandler(BlueprintError)
    def _h_blueprint(e: BlueprintError):
        """Map domain errors by their error code."""

        logger.info("Blueprint request rejected", error_code=e.error_code, detail=str(e))

        return make_error(str(e), e.error_code)

    @app.errorhandler(404)
    def _h_404(_e):
        """Handle 404 errors."""

        return make_error('Not found', 'NOT_FOUND')

    @app.errorhandler(405)
    def _h_405(_e):
        """Handle 405 errors."""

        return make_error('Method not allowed', 'METHOD_NOT_ALLOWED')

    @app.errorhandler(Exception)
    def _h_exc(e: Exception):
        """Handle all other errors."""

        if isinstance(e, HTTPException):
            return jsonify({'error': e.description, 'code': 'INVALID_ARGUMENT'}), e.code or 500
        if isinstance(e, KeyError):
            return make_error('Missing required fields', 'MISSING_FIELDS')
        if isinstance(e, ValueError):
            return make_error('Invalid argument', 'INVALID_ARGUMENT')

        logger.error("Unhandled error", error=type(e).__name__, detail=str(e))

        return make_error('Internal server error', 'INTERNAL_ERROR')
