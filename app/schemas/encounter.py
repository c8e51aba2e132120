"""Schemas for monster encounters (slay endpoints)."""

from pydantic import BaseModel, Field


class SlayRandomMonsterRequest(BaseModel):
    username: str = Field(..., min_length=1, max_length=255)


class SlayMonsterRequest(BaseModel):
    username: str = Field(..., min_length=1, max_length=255)
    monster_id: str = Field(..., min_length=1, max_length=255)


class EncounterResult(BaseModel):
    """Outcome of one encounter: award, updated progression and narrative message."""

    username: str
    monster_id: str
    monster_name: str
    points: int = Field(..., ge=0)
    level: int = Field(..., ge=1)
    experience: int = Field(..., ge=0)
    levels_gained: int = Field(default=0, ge=0)
    message: str
