"""Health check and utility routes"""

from fastapi import APIRouter, Depends
import logging

from api.dependencies import get_screen_registry
from app.config import settings
from services.screen_registry import ScreenRegistry

router = APIRouter(tags=["Health"])
logger = logging.getLogger("gorestaurant.api.health")


@router.get("/health-check")
def health_check(screens: ScreenRegistry = Depends(get_screen_registry)):
    """Basic health check endpoint"""
    screens.expire_idle()
    return {
        "status": "ok",
        "service": settings.app_name,
        "catalog_api_url": settings.catalog_api_url,
        "open_screens": len(screens),
    }
