"""Keyed access to a single MongoDB collection."""

import logging
from typing import Any

from pymongo import ASCENDING
from pymongo.database import Database
from pymongo.errors import DuplicateKeyError

from app.core.exceptions import DuplicateError

logger = logging.getLogger(__name__)

# Documents are returned without Mongo's internal _id.
PUBLIC_PROJECTION = {"_id": 0}


class DocumentCollection:
    """
    Find/insert/update/delete for documents identified by a unique id field.

    Update and delete return the matched/deleted counts so callers can decide
    whether "nothing happened" is an error.
    """

    def __init__(self, db: Database, collection_name: str, id_field: str) -> None:
        self.collection = db[collection_name]
        self.id_field = id_field

    def find(self, key: str) -> dict[str, Any] | None:
        return self.collection.find_one({self.id_field: key}, PUBLIC_PROJECTION)

    def list_all(self, limit: int = 100) -> list[dict[str, Any]]:
        cursor = self.collection.find({}, PUBLIC_PROJECTION).sort(self.id_field, ASCENDING)
        return list(cursor.limit(limit))

    def insert(self, doc: dict[str, Any]) -> None:
        """Insert doc; a unique index violation becomes DuplicateError."""
        try:
            # insert_one adds _id to the dict it is given; keep the caller's copy clean.
            self.collection.insert_one(dict(doc))
        except DuplicateKeyError as e:
            raise DuplicateError(
                f"{self.id_field} '{doc.get(self.id_field)}' already exists"
            ) from e

    def update(self, key: str, fields: dict[str, Any]) -> int:
        result = self.collection.update_one({self.id_field: key}, {"$set": fields})
        return result.matched_count

    def count(self) -> int:
        return self.collection.count_documents({})

    def delete(self, key: str) -> int:
        result = self.collection.delete_one({self.id_field: key})
        return result.deleted_count

    def ensure_indexes(self) -> None:
        """Create the unique index on the id field (idempotent)."""
        self.collection.create_index(
            [(self.id_field, ASCENDING)],
            name=f"uniq_{self.id_field}",
            unique=True,
        )
        logger.debug(
            "Index ensured",
            extra={"collection": self.collection.name, "field": self.id_field},
        )
