from flask import current_app, jsonify
from werkzeug.exceptions import HTTPException


class AppError(Exception):
    status = 500

    def __init__(self, message=None):
        super().__init__(message)
        self.message = message


class NotFoundError(AppError):
    status = 404

    def __init__(self, message="Not Found"):
        super().__init__(message)


class BadRequestError(AppError):
    status = 400

    def __init__(self, message="Bad Request"):
        super().__init__(message)


class UnauthorizedError(AppError):
    status = 401

    def __init__(self, message="Unauthorized"):
        super().__init__(message)


def _error_response(message, status):
    return jsonify({"error": {"message": message, "status": status}}), status


def register_error_handlers(app):
    @app.errorhandler(AppError)
    def handle_app_error(error):
        return _error_response(error.message, error.status)

    @app.errorhandler(HTTPException)
    def handle_http_exception(error):
        return _error_response(error.description, error.code)

    @app.errorhandler(Exception)
    def handle_unexpected_error(error):
        if not current_app.testing:
            current_app.logger.exception("Unhandled error: %s", error)
        return _error_response("Internal Server Error", 500)
