import json

from flask import current_app, jsonify


class ValidationError(Exception):
    status_code = 400


class DuplicateNameError(ValidationError):
    status_code = 409


class NotFoundError(Exception):
    status_code = 404


class StorageError(Exception):
    """Database file exists but does not hold the expected structure."""


def register_error_handlers(app):
    def _client_error(e):
        return jsonify({"error": str(e)}), e.status_code

    def _storage_error(e):
        current_app.logger.exception("Database read/write failed")
        return jsonify({"error": "Storage failure"}), 500

    app.register_error_handler(ValidationError, _client_error)
    app.register_error_handler(NotFoundError, _client_error)
    app.register_error_handler(StorageError, _storage_error)
    app.register_error_handler(OSError, _storage_error)
    app.register_error_handler(json.JSONDecodeError, _storage_error)
