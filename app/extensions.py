# app/extensions.py
from flask import current_app
from flask_cors import CORS

from .storage.document_store import DocumentStore

# CORS is a real Flask extension (keeps init_app)
cors = CORS()

STORE_KEY = "document_store"


def init_store(app) -> DocumentStore:
    """Create the app's single DocumentStore and register it on ``app.extensions``."""
    store = DocumentStore(app.config["DATABASE_PATH"])
    app.extensions[STORE_KEY] = store
    return store


def get_store() -> DocumentStore:
    return current_app.extensions[STORE_KEY]
