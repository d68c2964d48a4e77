"""JSON error handlers shared by every blueprint."""

from flask import Blueprint, current_app, jsonify
from google.api_core.exceptions import GoogleAPIError
from werkzeug.exceptions import HTTPException

from .errors import AppError, status_code_for

error_handlers_bp = Blueprint("error_handlers", __name__)

INTERNAL_ERROR_MESSAGE = "Internal Server Error"


@error_handlers_bp.app_errorhandler(AppError)
def handle_app_error(error):
    """Map application errors to their status code."""
    status_code = status_code_for(error)
    if status_code >= 500:
        # Details stay in the log, never in the response body.
        current_app.logger.error(f"Application Error: {error.message}")
        return jsonify(message=INTERNAL_ERROR_MESSAGE), status_code
    current_app.logger.warning(f"{type(error).__name__}: {error.message}")
    return jsonify(message=error.message), status_code


@error_handlers_bp.app_errorhandler(GoogleAPIError)
def handle_db_error(e):
    """Handles Firestore errors."""
    current_app.logger.error(f"Database Error: {e}")
    return jsonify(message=INTERNAL_ERROR_MESSAGE), 500


@error_handlers_bp.app_errorhandler(404)
def handle_404(e):
    """Handles generic 404 errors for routes that don't exist."""
    return jsonify(message="Route not found"), 404


@error_handlers_bp.app_errorhandler(HTTPException)
def handle_http_exception(e):
    """Render other HTTP errors (405, malformed JSON) as JSON."""
    return jsonify(message=e.description), e.code


@error_handlers_bp.app_errorhandler(Exception)
def handle_unexpected_error(e):
    """Handles unexpected server errors."""
    current_app.logger.error(f"Internal Server Error: {e}", exc_info=e)
    return jsonify(message=INTERNAL_ERROR_MESSAGE), 500
