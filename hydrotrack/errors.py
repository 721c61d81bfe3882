from flask import jsonify
from marshmallow import ValidationError
from werkzeug.exceptions import HTTPException

from hydrotrack.utils.validation import format_validation_error


def register_error_handlers(app):
    """Every error leaves the API as {"message": ...}."""

    @app.errorhandler(ValidationError)
    def handle_validation_error(error):
        return jsonify({"message": format_validation_error(error.messages)}), 400

    @app.errorhandler(HTTPException)
    def handle_http_exception(error):
        return jsonify({"message": error.description}), error.code

    @app.errorhandler(Exception)
    def handle_unexpected_error(error):
        app.logger.exception("Unhandled error: %s", error)
        return jsonify({"message": "Internal server error"}), 500
