"""Document store access (MongoDB collections)."""

from typing import Annotated

from fastapi import Depends
from pymongo.database import Database

from app.core.database import get_db
from app.stores.accounts import AccountStore
from app.stores.base import DocumentCollection
from app.stores.catalog import MonsterCatalog, item_collection, weapon_collection


def get_account_store(db: Annotated[Database, Depends(get_db)]) -> AccountStore:
    return AccountStore(db)


def get_monster_catalog(db: Annotated[Database, Depends(get_db)]) -> MonsterCatalog:
    return MonsterCatalog(db)


def get_item_store(db: Annotated[Database, Depends(get_db)]) -> DocumentCollection:
    return item_collection(db)


def get_weapon_store(db: Annotated[Database, Depends(get_db)]) -> DocumentCollection:
    return weapon_collection(db)


def ensure_indexes(db: Database) -> None:
    """Create unique indexes for every collection (idempotent). Run once on startup."""
    AccountStore(db).ensure_indexes()
    MonsterCatalog(db).ensure_indexes()
    item_collection(db).ensure_indexes()
    weapon_collection(db).ensure_indexes()


__all__ = [
    "AccountStore",
    "DocumentCollection",
    "MonsterCatalog",
    "ensure_indexes",
    "get_account_store",
    "get_item_store",
    "get_monster_catalog",
    "get_weapon_store",
    "item_collection",
    "weapon_collection",
]
