"""
Progression engine: resolve a monster encounter into experience and levels.

An account's progression is the pair (level, experience) with the invariant
0 <= experience < level * 100. Every encounter adds rarity-based points and
rolls over as many level thresholds as the award covers.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from app.core.exceptions import ConflictError, NoContentError, NotFoundError
from app.schemas.encounter import EncounterResult

if TYPE_CHECKING:
    from app.stores.accounts import AccountStore
    from app.stores.catalog import MonsterCatalog

logger = logging.getLogger(__name__)

# Experience awarded per monster rarity.
RARITY_POINTS: dict[str, int] = {
    "common": 10,
    "rare": 25,
    "epic": 50,
    "legendary": 100,
}
DEFAULT_RARITY = "common"

# Experience needed to leave level N is N * LEVEL_THRESHOLD_STEP.
LEVEL_THRESHOLD_STEP = 100


def rarity_points(monster: dict[str, Any]) -> int:
    """Points for a monster document; missing or unknown rarity (case-sensitive) counts as common."""
    attributes = monster.get("attributes") or {}
    rarity = attributes.get("rarity")
    if not isinstance(rarity, str):
        rarity = DEFAULT_RARITY
    return RARITY_POINTS.get(rarity, RARITY_POINTS[DEFAULT_RARITY])


def level_threshold(level: int) -> int:
    return level * LEVEL_THRESHOLD_STEP


def apply_experience(level: int, experience: int, points: int) -> tuple[int, int]:
    """
    Add points and carry over every threshold crossed.

    Returns the new (level, experience). A single award may span several
    levels, e.g. (1, 95) + 110 -> (3, 5).
    """
    if level < 1 or experience < 0 or points < 0:
        raise ValueError(
            f"invalid progression input: level={level}, experience={experience}, points={points}"
        )
    experience += points
    threshold = level_threshold(level)
    while experience >= threshold:
        level += 1
        experience -= threshold
        threshold = level_threshold(level)
    return level, experience


def _select_monster(monsters: MonsterCatalog, monster_id: str | None) -> dict[str, Any]:
    if monster_id is None:
        monster = monsters.sample_one()
        if monster is None:
            raise NoContentError("No monsters available")
        return monster
    monster = monsters.find_by_id(monster_id)
    if monster is None:
        raise NotFoundError("Monster not found")
    return monster


def resolve_encounter(
    accounts: AccountStore,
    monsters: MonsterCatalog,
    username: str,
    monster_id: str | None = None,
) -> EncounterResult:
    """
    Resolve one encounter for username against monster_id, or a random monster when None.

    The write is conditional on the level/experience that were read, so a
    concurrent encounter or a deletion makes it fail with ConflictError
    instead of losing an update. No store mutation happens before both the
    account and the monster are resolved.
    """
    account = accounts.find_by_username(username)
    if account is None:
        raise NotFoundError("User not found")
    monster = _select_monster(monsters, monster_id)

    profile = account.get("profile") or {}
    # Stored values, None when absent; the write must match exactly what was read.
    stored_level = profile.get("level")
    stored_experience = profile.get("experience")
    old_level = 1 if stored_level is None else stored_level
    old_experience = 0 if stored_experience is None else stored_experience
    points = rarity_points(monster)
    level, experience = apply_experience(old_level, old_experience, points)

    matched = accounts.update_progression(
        username,
        expected_level=stored_level,
        expected_experience=stored_experience,
        level=level,
        experience=experience,
    )
    if matched == 0:
        logger.warning(
            "Progression update matched no account",
            extra={"username": username, "expected_level": old_level},
        )
        raise ConflictError("Account changed or was removed during the encounter; retry")

    levels_gained = level - old_level
    monster_name = monster.get("name", "an unknown monster")
    message = f"{username} slayed {monster_name} and earned {points} experience points!"
    if levels_gained:
        message += f" Reached level {level}."
        logger.info(
            "Level up",
            extra={"username": username, "level": level, "levels_gained": levels_gained},
        )

    return EncounterResult(
        username=username,
        monster_id=str(monster.get("monster_id", "")),
        monster_name=monster_name,
        points=points,
        level=level,
        experience=experience,
        levels_gained=levels_gained,
        message=message,
    )
