"""Game catalog collections: monsters, items and weapons."""

from typing import Any

from pymongo.database import Database

from app.stores.base import DocumentCollection

MONSTERS_COLLECTION = "monsters"
ITEMS_COLLECTION = "items"
WEAPONS_COLLECTION = "weapons"


class MonsterCatalog(DocumentCollection):
    """Monster definitions keyed by monster_id."""

    def __init__(self, db: Database) -> None:
        super().__init__(db, MONSTERS_COLLECTION, "monster_id")

    def find_by_id(self, monster_id: str) -> dict[str, Any] | None:
        return self.find(monster_id)

    def sample_one(self) -> dict[str, Any] | None:
        """Return one uniformly sampled monster, or None when the catalog is empty."""
        docs = list(
            self.collection.aggregate(
                [{"$sample": {"size": 1}}, {"$project": {"_id": 0}}]
            )
        )
        return docs[0] if docs else None


def item_collection(db: Database) -> DocumentCollection:
    return DocumentCollection(db, ITEMS_COLLECTION, "item_id")


def weapon_collection(db: Database) -> DocumentCollection:
    return DocumentCollection(db, WEAPONS_COLLECTION, "weapon_id")
