import logging
from flask import jsonify, request
from werkzeug.exceptions import HTTPException
from .errors import AppError

logger = logging.getLogger(__name__)


def register_error_handlers(app):
    @app.errorhandler(AppError)
    def handle_app_error(error):
        if error.status_code >= 500:
            logger.error(
                "%s on %s: %s",
                error.__class__.__name__,
                request.path,
                error.__cause__ or error.message,
            )
        else:
            logger.info(
                "%s on %s: %s", error.__class__.__name__, request.path, error.message
            )
        return jsonify({"success": False, "message": error.message}), error.status_code

    @app.errorhandler(HTTPException)
    def handle_http_exception(error):
        return (
            jsonify({"success": False, "message": error.description}),
            error.code,
        )

    @app.errorhandler(Exception)
    def handle_exception(error):
        """Keeps stack traces out of responses."""
        logger.exception("Unhandled exception on %s", request.path)
        return jsonify({"success": False, "message": "Server Error"}), 500
