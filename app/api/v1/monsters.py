"""Monster catalog: reads for any player, writes for admins."""

from typing import Annotated

from fastapi import APIRouter, Depends, Query, status

from app.api.v1.auth import get_current_claim, require_admin
from app.schemas.auth import MessageResponse, TokenClaim
from app.schemas.catalog import Monster, MonsterCreate, MonsterUpdate
from app.services import catalog as catalog_service
from app.stores import MonsterCatalog, get_monster_catalog

router = APIRouter()
KIND = "Monster"


@router.post("", response_model=Monster, status_code=status.HTTP_201_CREATED)
def create_monster(
    body: MonsterCreate,
    _admin: Annotated[TokenClaim, Depends(require_admin)],
    monsters: Annotated[MonsterCatalog, Depends(get_monster_catalog)],
) -> Monster:
    catalog_service.create_entry(monsters, KIND, body.model_dump())
    return Monster.model_validate(body.model_dump())


@router.get("", response_model=list[Monster])
def list_monsters(
    _user: Annotated[TokenClaim, Depends(get_current_claim)],
    monsters: Annotated[MonsterCatalog, Depends(get_monster_catalog)],
    limit: int = Query(default=100, ge=1, le=1000),
) -> list[Monster]:
    return [Monster.model_validate(doc) for doc in catalog_service.list_entries(monsters, limit)]


@router.get("/{monster_id}", response_model=Monster)
def get_monster(
    monster_id: str,
    _user: Annotated[TokenClaim, Depends(get_current_claim)],
    monsters: Annotated[MonsterCatalog, Depends(get_monster_catalog)],
) -> Monster:
    return Monster.model_validate(catalog_service.get_entry(monsters, KIND, monster_id))


@router.put("/{monster_id}", response_model=Monster)
def update_monster(
    monster_id: str,
    body: MonsterUpdate,
    _admin: Annotated[TokenClaim, Depends(require_admin)],
    monsters: Annotated[MonsterCatalog, Depends(get_monster_catalog)],
) -> Monster:
    doc = catalog_service.update_entry(monsters, KIND, monster_id, body.model_dump())
    return Monster.model_validate(doc)


@router.delete("/{monster_id}", response_model=MessageResponse)
def delete_monster(
    monster_id: str,
    _admin: Annotated[TokenClaim, Depends(require_admin)],
    monsters: Annotated[MonsterCatalog, Depends(get_monster_catalog)],
) -> MessageResponse:
    catalog_service.delete_entry(monsters, KIND, monster_id)
    return MessageResponse(message="Monster deleted successfully")
