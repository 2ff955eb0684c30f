"""
API dependencies for dependency injection
"""

from fastapi import Depends, Request

from services.order_composition_service import OrderCompositionService
from services.screen_registry import ScreenRegistry


def get_screen_registry(request: Request) -> ScreenRegistry:
    """
    Screen registry created in the application lifespan.

    Usage:
        @router.get("/example")
        def example(screens: ScreenRegistry = Depends(get_screen_registry)):
            ...
    """
    return request.app.state.screens


def get_engine(
    screen_id: str, screens: ScreenRegistry = Depends(get_screen_registry)
) -> OrderCompositionService:
    """Engine of one open screen; unknown ids raise NotFoundError (404)."""
    return screens.get(screen_id)
