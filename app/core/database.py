"""MongoDB client lifecycle and the request-scoped database dependency."""

import logging
from typing import TYPE_CHECKING

from fastapi import Request
from pymongo import MongoClient
from pymongo.database import Database
from pymongo.errors import PyMongoError

if TYPE_CHECKING:
    from app.core.config import Settings

logger = logging.getLogger(__name__)


def create_client(settings: "Settings") -> MongoClient:
    """Build a client; pymongo connects lazily, so this does no network I/O."""
    return MongoClient(
        settings.MONGODB_URI,
        serverSelectionTimeoutMS=settings.MONGODB_TIMEOUT_MS,
        tz_aware=True,
    )


def get_db(request: Request) -> Database:
    """Dependency that returns the database handle acquired at startup."""
    return request.app.state.db


def check_db_connected(db: Database) -> bool:
    """Ping the server to verify the database is reachable."""
    try:
        db.client.admin.command("ping")
        return True
    except PyMongoError as e:
        logger.warning("Database ping failed: %s", e)
        return False
