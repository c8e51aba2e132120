"""Encounter endpoints: slay a random or a specific monster and gain experience."""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends

from app.api.v1.auth import get_current_claim
from app.core.exceptions import ForbiddenError
from app.schemas.auth import Role, TokenClaim
from app.schemas.encounter import (
    EncounterResult,
    SlayMonsterRequest,
    SlayRandomMonsterRequest,
)
from app.services.progression import resolve_encounter
from app.stores import AccountStore, MonsterCatalog, get_account_store, get_monster_catalog

logger = logging.getLogger(__name__)
router = APIRouter()


def _ensure_may_act_for(claim: TokenClaim, username: str) -> None:
    """Players resolve encounters for themselves; admins for anyone."""
    if claim.role != Role.ADMIN and claim.sub != username:
        raise ForbiddenError("Cannot resolve encounters for another account")


@router.post("/slay-random-monster", response_model=EncounterResult)
def slay_random_monster(
    body: SlayRandomMonsterRequest,
    claim: Annotated[TokenClaim, Depends(get_current_claim)],
    accounts: Annotated[AccountStore, Depends(get_account_store)],
    monsters: Annotated[MonsterCatalog, Depends(get_monster_catalog)],
) -> EncounterResult:
    """Sample one monster uniformly from the catalog and award its experience."""
    _ensure_may_act_for(claim, body.username)
    result = resolve_encounter(accounts, monsters, body.username, monster_id=None)
    logger.info(
        "Encounter resolved",
        extra={"username": result.username, "monster_id": result.monster_id, "points": result.points},
    )
    return result


@router.post("/slay-monster", response_model=EncounterResult)
def slay_monster(
    body: SlayMonsterRequest,
    claim: Annotated[TokenClaim, Depends(get_current_claim)],
    accounts: Annotated[AccountStore, Depends(get_account_store)],
    monsters: Annotated[MonsterCatalog, Depends(get_monster_catalog)],
) -> EncounterResult:
    _ensure_may_act_for(claim, body.username)
    result = resolve_encounter(accounts, monsters, body.username, monster_id=body.monster_id)
    logger.info(
        "Encounter resolved",
        extra={"username": result.username, "monster_id": result.monster_id, "points": result.points},
    )
    return result
