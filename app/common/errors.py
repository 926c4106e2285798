import logging

from flask import jsonify, render_template
from flask_limiter import RateLimitExceeded
from marshmallow import ValidationError
from werkzeug.exceptions import HTTPException

from app.common.utils import wants_json

log = logging.getLogger("app.error")


class ApiError(Exception):
    def __init__(self, message, status_code=400, code="bad_request", details=None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.code = code
        self.details = details or {}


class MalformedRequest(ApiError):
    """Requête inexploitable: identifiant absent ou champ qui n'est pas une chaîne."""

    def __init__(self, message="Malformed request.", details=None):
        super().__init__(message, 400, "malformed_request", details)


class NoteNotFound(ApiError):
    def __init__(self, note_id: str):
        super().__init__(
            f'No note with the id "{note_id}" exists',
            404,
            "not_found",
            {"note_id": note_id},
        )
        self.note_id = note_id


class UserNotFound(ApiError):
    def __init__(self, username: str):
        super().__init__(
            f'No user with the username "{username}" exists',
            404,
            "not_found",
            {"username": username},
        )
        self.username = username


class PersistenceFailure(ApiError):
    """L'écriture a échoué après une validation réussie. Pas de retry."""

    def __init__(self, message="Could not save the note.", details=None):
        super().__init__(message, 500, "persistence_error", details)


def _json_error(message, status, code, details=None):
    return jsonify({
        "error": {"code": code, "message": message, "details": details or {}}
    }), status


def _error_response(message, status, code, details=None):
    if wants_json():
        return _json_error(message, status, code, details)
    return render_template("errors/error.html", message=message, status=status, code=code), status


def register_error_handlers(app):
    @app.errorhandler(ApiError)
    def handle_api_error(e: ApiError):
        return _error_response(e.message, e.status_code, e.code, e.details)

    @app.errorhandler(ValidationError)
    def handle_validation_error(e: ValidationError):
        return _error_response("Invalid request body.", 400, "validation_error", e.messages)

    @app.errorhandler(RateLimitExceeded)
    def handle_rate_limit(e):
        return _error_response("Rate limit exceeded.", 429, "rate_limited")

    @app.errorhandler(HTTPException)
    def handle_http_exception(e: HTTPException):
        # Ex: 404, 405, 413…
        return _error_response(e.description or "HTTP error", e.code or 500, "http_error")

    @app.errorhandler(Exception)
    def handle_unexpected(e: Exception):
        # Le traceback reste dans les logs, jamais côté client
        log.exception("unexpected_error")
        return _error_response("Internal server error.", 500, "internal_error")
