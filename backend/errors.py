# backend/errors.py
import logging
import sqlite3

from flask import jsonify
from werkzeug.exceptions import HTTPException

logger = logging.getLogger("finance-backend")


class ApiError(Exception):
    """Base error translated into a JSON response at the Flask boundary."""
    status_code = 500
    code = "InternalError"

    def __init__(self, message=None):
        super().__init__(message or self.code)
        self.message = message or self.code

    def to_dict(self):
        return {"error": self.code, "message": self.message}


class ValidationError(ApiError):
    status_code = 400
    code = "ValidationError"


class DuplicateUsername(ApiError):
    status_code = 400
    code = "DuplicateUsername"


class InvalidCredentials(ApiError):
    status_code = 400
    code = "InvalidCredentials"


class InvalidToken(ApiError):
    status_code = 401
    code = "InvalidToken"


class MissingAuth(ApiError):
    status_code = 401
    code = "MissingAuth"


class NotFound(ApiError):
    status_code = 404
    code = "NotFound"


class InternalError(ApiError):
    status_code = 500
    code = "InternalError"


def error_response(err):
    return jsonify(err.to_dict()), err.status_code


def register_error_handlers(app):
    @app.errorhandler(ApiError)
    def handle_api_error(err):
        if err.status_code >= 500:
            logger.error(f"{err.code}: {err.message}")
        return error_response(err)

    @app.errorhandler(sqlite3.Error)
    def handle_db_error(err):
        logger.exception("Database error")
        return error_response(InternalError("Database error"))

    @app.errorhandler(404)
    def handle_not_found(err):
        return error_response(NotFound("Resource not found"))

    @app.errorhandler(HTTPException)
    def handle_http_error(err):
        return jsonify({"error": err.name.replace(" ", ""), "message": err.description}), err.code

    @app.errorhandler(Exception)
    def handle_unexpected(err):
        logger.exception("Unhandled error")
        return error_response(InternalError("Unexpected server error"))
