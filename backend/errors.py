# backend/errors.py

import logging
import traceback

from flask import current_app, jsonify
from pydantic import ValidationError
from werkzeug.exceptions import HTTPException

from models import db

logger = logging.getLogger(__name__)


class ApiError(Exception):
    """Base for errors that map straight onto an HTTP response."""

    status_code = 500
    default_message = "Something went wrong!"

    def __init__(self, message=None, errors=None):
        super().__init__(message or self.default_message)
        self.message = message or self.default_message
        self.errors = errors


class InvalidInput(ApiError):
    status_code = 400
    default_message = "Invalid input"


class Conflict(ApiError):
    status_code = 400
    default_message = "Resource already exists"


class EmailTaken(Conflict):
    default_message = "User with this email already exists"


class Unauthorized(ApiError):
    status_code = 401
    default_message = "Unauthorized"


class InvalidCredentials(Unauthorized):
    default_message = "Invalid credentials"


class NotFound(ApiError):
    status_code = 404
    default_message = "Not found"


def error_response(message, status, errors=None, stack=None):
    body = {"status": "error", "message": message}
    if errors is not None:
        body["errors"] = errors
    if stack is not None:
        body["stack"] = stack
    return jsonify(body), status


def _validation_message(exc: ValidationError) -> str:
    missing = [
        ".".join(str(p) for p in err["loc"])
        for err in exc.errors()
        if err["type"] == "missing"
    ]
    if missing:
        return "Please provide: " + ", ".join(missing)
    return "Validation Error"


def register_error_handlers(app):

    @app.errorhandler(ApiError)
    def handle_api_error(exc):
        return error_response(exc.message, exc.status_code, exc.errors)

    @app.errorhandler(ValidationError)
    def handle_validation_error(exc):
        details = exc.errors(include_url=False, include_context=False, include_input=False)
        return error_response(_validation_message(exc), 400, details)

    @app.errorhandler(HTTPException)
    def handle_http_error(exc):
        if exc.code == 404:
            return error_response("Route not found", 404)
        return error_response(exc.description or exc.name, exc.code or 500)

    @app.errorhandler(Exception)
    def handle_unexpected(exc):
        db.session.rollback()
        logger.exception("Unhandled error")
        stack = None
        if current_app.config.get("APP_ENV") != "production":
            stack = traceback.format_exc()
        return error_response(str(exc) or "Something went wrong!", 500, stack=stack)
