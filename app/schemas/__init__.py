"""Pydantic request/response schemas."""

from app.schemas.account import AccountView, ProfileAttributes
from app.schemas.auth import (
    LoginRequest,
    MessageResponse,
    PasswordChangeRequest,
    RegisterRequest,
    Role,
    TokenClaim,
    TokenResponse,
)
from app.schemas.catalog import (
    Item,
    ItemCreate,
    ItemUpdate,
    Monster,
    MonsterCreate,
    MonsterUpdate,
    Weapon,
    WeaponCreate,
    WeaponUpdate,
)
from app.schemas.encounter import (
    EncounterResult,
    SlayMonsterRequest,
    SlayRandomMonsterRequest,
)
from app.schemas.health import HealthResponse

__all__ = [
    "AccountView",
    "EncounterResult",
    "HealthResponse",
    "Item",
    "ItemCreate",
    "ItemUpdate",
    "LoginRequest",
    "MessageResponse",
    "Monster",
    "MonsterCreate",
    "MonsterUpdate",
    "PasswordChangeRequest",
    "ProfileAttributes",
    "RegisterRequest",
    "Role",
    "SlayMonsterRequest",
    "SlayRandomMonsterRequest",
    "TokenClaim",
    "TokenResponse",
    "Weapon",
    "WeaponCreate",
    "WeaponUpdate",
]
