"""Weapon catalog: reads for any player, writes for admins."""

from typing import Annotated

from fastapi import APIRouter, Depends, Query, status

from app.api.v1.auth import get_current_claim, require_admin
from app.schemas.auth import MessageResponse, TokenClaim
from app.schemas.catalog import Weapon, WeaponCreate, WeaponUpdate
from app.services import catalog as catalog_service
from app.stores import DocumentCollection, get_weapon_store

router = APIRouter()
KIND = "Weapon"


@router.post("", response_model=Weapon, status_code=status.HTTP_201_CREATED)
def create_weapon(
    body: WeaponCreate,
    _admin: Annotated[TokenClaim, Depends(require_admin)],
    weapons: Annotated[DocumentCollection, Depends(get_weapon_store)],
) -> Weapon:
    catalog_service.create_entry(weapons, KIND, body.model_dump())
    return Weapon.model_validate(body.model_dump())


@router.get("", response_model=list[Weapon])
def list_weapons(
    _user: Annotated[TokenClaim, Depends(get_current_claim)],
    weapons: Annotated[DocumentCollection, Depends(get_weapon_store)],
    limit: int = Query(default=100, ge=1, le=1000),
) -> list[Weapon]:
    return [Weapon.model_validate(doc) for doc in catalog_service.list_entries(weapons, limit)]


@router.get("/{weapon_id}", response_model=Weapon)
def get_weapon(
    weapon_id: str,
    _user: Annotated[TokenClaim, Depends(get_current_claim)],
    weapons: Annotated[DocumentCollection, Depends(get_weapon_store)],
) -> Weapon:
    return Weapon.model_validate(catalog_service.get_entry(weapons, KIND, weapon_id))


@router.put("/{weapon_id}", response_model=Weapon)
def update_weapon(
    weapon_id: str,
    body: WeaponUpdate,
    _admin: Annotated[TokenClaim, Depends(require_admin)],
    weapons: Annotated[DocumentCollection, Depends(get_weapon_store)],
) -> Weapon:
    return Weapon.model_validate(
        catalog_service.update_entry(weapons, KIND, weapon_id, body.model_dump())
    )


@router.delete("/{weapon_id}", response_model=MessageResponse)
def delete_weapon(
    weapon_id: str,
    _admin: Annotated[TokenClaim, Depends(require_admin)],
    weapons: Annotated[DocumentCollection, Depends(get_weapon_store)],
) -> MessageResponse:
    catalog_service.delete_entry(weapons, KIND, weapon_id)
    return MessageResponse(message="Weapon deleted successfully")
