"""Catalog management for monsters, items and weapons."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from app.core.exceptions import DuplicateError, NotFoundError, ValidationError

if TYPE_CHECKING:
    from app.stores.base import DocumentCollection

logger = logging.getLogger(__name__)


def create_entry(store: DocumentCollection, kind: str, doc: dict[str, Any]) -> None:
    """Insert a catalog entry; DuplicateError when its id already exists."""
    key = doc[store.id_field]
    if store.find(key) is not None:
        raise DuplicateError(f"{kind} with this ID already exists")
    store.insert(doc)
    logger.info("Catalog entry created", extra={"kind": kind, "key": key})


def get_entry(store: DocumentCollection, kind: str, key: str) -> dict[str, Any]:
    doc = store.find(key)
    if doc is None:
        raise NotFoundError(f"{kind} not found")
    return doc


def list_entries(store: DocumentCollection, limit: int = 100) -> list[dict[str, Any]]:
    return store.list_all(limit=limit)


def update_entry(
    store: DocumentCollection, kind: str, key: str, fields: dict[str, Any]
) -> dict[str, Any]:
    """Set the given fields (None values are skipped) and return the updated entry."""
    changes = {name: value for name, value in fields.items() if value is not None}
    if not changes:
        raise ValidationError("No fields to update")
    if store.id_field in changes:
        raise ValidationError(f"{store.id_field} cannot be changed")
    if store.update(key, changes) == 0:
        raise NotFoundError(f"{kind} not found")
    logger.info(
        "Catalog entry updated",
        extra={"kind": kind, "key": key, "fields": sorted(changes)},
    )
    return get_entry(store, kind, key)


def delete_entry(store: DocumentCollection, kind: str, key: str) -> None:
    if store.delete(key) == 0:
        raise NotFoundError(f"{kind} not found")
    logger.info("Catalog entry deleted", extra={"kind": kind, "key": key})
