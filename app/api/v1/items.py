"""Item catalog: reads for any player, writes for admins."""

from typing import Annotated

from fastapi import APIRouter, Depends, Query, status

from app.api.v1.auth import get_current_claim, require_admin
from app.schemas.auth import MessageResponse, TokenClaim
from app.schemas.catalog import Item, ItemCreate, ItemUpdate
from app.services import catalog as catalog_service
from app.stores import DocumentCollection, get_item_store

router = APIRouter()
KIND = "Item"


@router.post("", response_model=Item, status_code=status.HTTP_201_CREATED)
def create_item(
    body: ItemCreate,
    _admin: Annotated[TokenClaim, Depends(require_admin)],
    items: Annotated[DocumentCollection, Depends(get_item_store)],
) -> Item:
    catalog_service.create_entry(items, KIND, body.model_dump())
    return Item.model_validate(body.model_dump())


@router.get("", response_model=list[Item])
def list_items(
    _user: Annotated[TokenClaim, Depends(get_current_claim)],
    items: Annotated[DocumentCollection, Depends(get_item_store)],
    limit: int = Query(default=100, ge=1, le=1000),
) -> list[Item]:
    return [Item.model_validate(doc) for doc in catalog_service.list_entries(items, limit)]


@router.get("/{item_id}", response_model=Item)
def get_item(
    item_id: str,
    _user: Annotated[TokenClaim, Depends(get_current_claim)],
    items: Annotated[DocumentCollection, Depends(get_item_store)],
) -> Item:
    return Item.model_validate(catalog_service.get_entry(items, KIND, item_id))


@router.put("/{item_id}", response_model=Item)
def update_item(
    item_id: str,
    body: ItemUpdate,
    _admin: Annotated[TokenClaim, Depends(require_admin)],
    items: Annotated[DocumentCollection, Depends(get_item_store)],
) -> Item:
    return Item.model_validate(
        catalog_service.update_entry(items, KIND, item_id, body.model_dump())
    )


@router.delete("/{item_id}", response_model=MessageResponse)
def delete_item(
    item_id: str,
    _admin: Annotated[TokenClaim, Depends(require_admin)],
    items: Annotated[DocumentCollection, Depends(get_item_store)],
) -> MessageResponse:
    catalog_service.delete_entry(items, KIND, item_id)
    return MessageResponse(message="Item deleted successfully")
