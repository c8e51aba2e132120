"""Schemas for catalog documents: monsters, items and weapons."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class MonsterAttributes(BaseModel):
    """Monster attributes; rarity drives the experience award, extra keys are kept."""

    model_config = ConfigDict(extra="allow")

    rarity: str | None = None


class MonsterCreate(BaseModel):
    monster_id: str = Field(..., min_length=1, max_length=255)
    name: str = Field(..., min_length=1, max_length=255)
    attributes: MonsterAttributes = Field(default_factory=MonsterAttributes)
    location: str = ""


class MonsterUpdate(BaseModel):
    name: str | None = Field(default=None, min_length=1, max_length=255)
    attributes: MonsterAttributes | None = None
    location: str | None = None


class Monster(MonsterCreate):
    pass


class ItemCreate(BaseModel):
    item_id: str = Field(..., min_length=1, max_length=255)
    name: str = Field(..., min_length=1, max_length=255)
    description: str = ""
    type: str = ""
    attributes: dict[str, Any] = Field(default_factory=dict)
    rarity: str | None = None


class ItemUpdate(BaseModel):
    name: str | None = Field(default=None, min_length=1, max_length=255)
    description: str | None = None
    type: str | None = None
    attributes: dict[str, Any] | None = None
    rarity: str | None = None


class Item(ItemCreate):
    pass


class WeaponCreate(BaseModel):
    weapon_id: str = Field(..., min_length=1, max_length=255)
    name: str = Field(..., min_length=1, max_length=255)
    description: str = ""
    damage: int = Field(default=0, ge=0)
    type: str = ""
    attributes: dict[str, Any] = Field(default_factory=dict)


class WeaponUpdate(BaseModel):
    name: str | None = Field(default=None, min_length=1, max_length=255)
    description: str | None = None
    damage: int | None = Field(default=None, ge=0)
    type: str | None = None
    attributes: dict[str, Any] | None = None


class Weapon(WeaponCreate):
    pass
