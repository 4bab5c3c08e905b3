from __future__ import annotations

import uuid
from datetime import datetime, timezone

from ..errors import NotFoundError, ValidationError
from ..storage.document_store import DocumentStore


def now_iso() -> str:
    return datetime.now(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


def normalize_collection_name(name) -> str:
    n = str(name or "").strip()
    if not n:
        raise ValidationError("Collection name is required.")
    return n


def _require_object(payload):
    if not isinstance(payload, dict):
        raise ValidationError("Payload must be a JSON object.")


def _find_index(collection: list[dict], record_id: str) -> int:
    for i, row in enumerate(collection):
        if row.get("id") == record_id:
            return i
    raise NotFoundError("Record not found.")


def list_records(store: DocumentStore, name: str) -> list[dict]:
    _, collection = store.get_collection(normalize_collection_name(name))
    return collection


def get_record(store: DocumentStore, name: str, record_id: str) -> dict:
    _, collection = store.get_collection(normalize_collection_name(name))
    return collection[_find_index(collection, record_id)]


def create_record(store: DocumentStore, name: str, payload) -> dict:
    name = normalize_collection_name(name)
    _require_object(payload)

    db, collection = store.get_collection(name)
    now = now_iso()
    # createdAt/updatedAt from the payload are kept so imports preserve history
    record = {
        "id": str(uuid.uuid4()),
        **{k: v for k, v in payload.items() if k != "id"},
        "createdAt": payload.get("createdAt") or now,
        "updatedAt": payload.get("updatedAt") or now,
    }
    collection.append(record)
    store.write_database(db)
    return record


def update_record(store: DocumentStore, name: str, record_id: str, payload) -> dict:
    """Shallow-merge ``payload`` onto the record; ``id`` and ``createdAt`` never change."""
    name = normalize_collection_name(name)
    _require_object(payload)

    db, collection = store.get_collection(name)
    index = _find_index(collection, record_id)
    current = collection[index]

    updated = {**current, **payload, "id": current["id"]}
    if "createdAt" in current:
        updated["createdAt"] = current["createdAt"]
    else:
        updated.pop("createdAt", None)
    updated["updatedAt"] = now_iso()

    collection[index] = updated
    store.write_database(db)
    return updated


def delete_record(store: DocumentStore, name: str, record_id: str) -> dict:
    name = normalize_collection_name(name)
    db, collection = store.get_collection(name)
    removed = collection.pop(_find_index(collection, record_id))
    store.write_database(db)
    return {"ok": True, "deleted": removed["id"]}
