from flask import Blueprint, jsonify, request

from ..extensions import get_store
from ..services.resources import (
    create_record,
    delete_record,
    get_record,
    list_records,
    update_record,
)

bp = Blueprint("resources_api", __name__)


@bp.get("/health")
def health():
    return jsonify({"ok": True})


# -----------------------------
# Generic CRUD over any collection
# -----------------------------
@bp.get("/collections/<collection>")
def list_collection(collection):
    return jsonify(list_records(get_store(), collection))


@bp.get("/collections/<collection>/<record_id>")
def get_collection_record(collection, record_id):
    return jsonify(get_record(get_store(), collection, record_id))


@bp.post("/collections/<collection>")
def create_collection_record(collection):
    # unparseable bodies come through as None and are rejected as non-objects
    payload = request.get_json(silent=True)
    record = create_record(get_store(), collection, payload)
    return jsonify(record), 201


@bp.patch("/collections/<collection>/<record_id>")
def update_collection_record(collection, record_id):
    payload = request.get_json(silent=True)
    return jsonify(update_record(get_store(), collection, record_id, payload))


@bp.delete("/collections/<collection>/<record_id>")
def delete_collection_record(collection, record_id):
    return jsonify(delete_record(get_store(), collection, record_id))
