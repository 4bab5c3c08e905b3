from pathlib import Path
import json
import logging
import os
from typing import Any, Dict, List, Tuple

from ..errors import StorageError

logger = logging.getLogger(__name__)


class DocumentStore:
    """JSON-on-disk database: one file holding every collection.

    The whole file is read on every call and rewritten on every save
    (write to ``<path>.tmp`` then rename). Nothing is cached between calls,
    so two concurrent read-modify-write cycles can lose an update.
    """

    def __init__(self, path: Path):
        self.path = Path(path)

    @property
    def tmp_path(self) -> Path:
        return self.path.with_name(self.path.name + ".tmp")

    def read_database(self) -> Dict[str, Any]:
        try:
            raw = self.path.read_text(encoding="utf-8")
        except FileNotFoundError:
            logger.debug("Database file %s missing, initialising empty database", self.path)
            db: Dict[str, Any] = {}
            self.write_database(db)
            return db

        if not raw.strip():
            return {}
        db = json.loads(raw)
        if not isinstance(db, dict):
            raise StorageError(f"{self.path} does not contain a JSON object")
        return db

    def write_database(self, db: Dict[str, Any]):
        self.path.parent.mkdir(parents=True, exist_ok=True)
        tmp = self.tmp_path
        with tmp.open("w", encoding="utf-8") as f:
            json.dump(db, f, indent=2, ensure_ascii=False)
        # primary file is only touched here
        os.replace(tmp, self.path)
        logger.debug("Wrote %d collection(s) to %s", len(db), self.path)

    def get_collection(self, name: str) -> Tuple[Dict[str, Any], List[Dict[str, Any]]]:
        """Return ``(db, collection)``; the collection is created in memory only.

        Mutate ``collection`` in place, then pass ``db`` to ``write_database``.
        """
        db = self.read_database()
        if name not in db:
            db[name] = []
        collection = db[name]
        if not isinstance(collection, list):
            raise StorageError(f"Collection {name!r} is not a list")
        if not all(isinstance(row, dict) for row in collection):
            raise StorageError(f"Collection {name!r} holds a non-object record")
        return db, collection
