"""Version 1 API routes, mounted under settings.API_PREFIX (/api)."""

from fastapi import APIRouter

from app.api.v1 import auth, destinations

router = APIRouter()
router.include_router(auth.router, prefix="/auth", tags=["auth"])
router.include_router(destinations.router, prefix="/destinations", tags=["destinations"])
