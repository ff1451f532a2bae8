"""API module for the application."""

from fastapi import APIRouter
from vibeswipe.api.feed import router as feed_router
from vibeswipe.api.swipe import router as swipe_router
from vibeswipe.api.preferences import router as preferences_router
from vibeswipe.api.alerts import router as alerts_router

__all__ = [
    'api_router',
    'feed_router',
    'swipe_router',
    'preferences_router',
    'alerts_router'
]

api_router = APIRouter()
api_router.include_router(feed_router, tags=["feed"])
api_router.include_router(swipe_router, tags=["swipe"])
api_router.include_router(preferences_router, tags=["preferences"])
api_router.include_router(alerts_router, prefix="/alerts", tags=["alerts"])
