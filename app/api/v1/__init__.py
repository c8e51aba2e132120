"""API v1 routes."""

from fastapi import APIRouter

from app.api.v1 import auth, encounters, health, items, monsters, users, weapons

router = APIRouter()
router.include_router(health.router, prefix="/health", tags=["health"])
router.include_router(auth.router, tags=["auth"])
router.include_router(encounters.router, tags=["encounters"])
router.include_router(users.router, prefix="/users", tags=["users"])
router.include_router(monsters.router, prefix="/monsters", tags=["monsters"])
router.include_router(items.router, prefix="/items", tags=["items"])
router.include_router(weapons.router, prefix="/weapons", tags=["weapons"])
