"""API router: include all route modules."""

from fastapi import APIRouter

from media_api.api import health, videos

api_router = APIRouter()

api_router.include_router(health.router)
api_router.include_router(videos.router)
