"""Health endpoint: store reachability and monster catalog readiness."""

from typing import Annotated

from fastapi import APIRouter, Depends
from pymongo.database import Database

from app.core.config import Settings, get_settings
from app.core.database import check_db_connected, get_db
from app.schemas.health import HealthResponse
from app.stores import MonsterCatalog

router = APIRouter()


@router.get("", response_model=HealthResponse)
def get_health(
    db: Annotated[Database, Depends(get_db)],
    settings: Annotated[Settings, Depends(get_settings)],
) -> HealthResponse:
    """Report "degraded" when MongoDB is unreachable; the catalog is only counted when it is not."""
    if not check_db_connected(db):
        return HealthResponse(
            status="degraded",
            environment=settings.APP_ENV,
            database_name=settings.MONGODB_DB_NAME,
            database="disconnected",
        )
    return HealthResponse(
        environment=settings.APP_ENV,
        database_name=settings.MONGODB_DB_NAME,
        database="connected",
        monster_count=MonsterCatalog(db).count(),
    )
