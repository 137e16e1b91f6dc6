from fastapi import APIRouter

from app.api.v1 import admin, battles, health, songs

api_router = APIRouter()

# Health (no prefix)
api_router.include_router(health.router)

# V1 endpoints
api_router.include_router(battles.router)
api_router.include_router(songs.router)
api_router.include_router(admin.router)
