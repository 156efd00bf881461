from fastapi import APIRouter

from app.api.routes import health, languages, translation

api_router = APIRouter()

api_router.include_router(health.router, tags=["health"])
api_router.include_router(languages.router, tags=["languages"])
api_router.include_router(translation.router, tags=["translation"])
