"""Service status payload: store connectivity and whether random encounters can be served."""

from typing import Literal

from pydantic import BaseModel, Field


class HealthResponse(BaseModel):
    status: Literal["ok", "degraded"] = "ok"
    environment: str = Field(description="APP_ENV of the running service")
    database_name: str = Field(description="MongoDB database the service is bound to")
    database: Literal["connected", "disconnected"]
    monster_count: int | None = Field(
        default=None,
        description="Monsters in the catalog; 0 means /slay-random-monster will fail",
    )
