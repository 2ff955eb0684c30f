"""
Food details routes - one screen per opened dish.
Forwards the screen intents (extras +/-, dish quantity +/-, favorite, confirm)
to the screen's order composition engine and returns the refreshed view.
"""

from fastapi import APIRouter, Depends, Response, status
import logging

from api.dependencies import get_engine, get_screen_registry
from domain.schemas.food_details_schemas import (
    FinishOrderResponse,
    FoodDetailsView,
    OpenScreenRequest,
    ScreenResponse,
)
from services.order_composition_service import OrderCompositionService
from services.screen_registry import ScreenRegistry

router = APIRouter(prefix="/screens", tags=["Food Details"])
logger = logging.getLogger("gorestaurant.api.food_details")


@router.post("", response_model=ScreenResponse, status_code=status.HTTP_201_CREATED)
async def open_screen(
    payload: OpenScreenRequest,
    screens: ScreenRegistry = Depends(get_screen_registry),
) -> ScreenResponse:
    """
    Open a screen for a dish.

    The screen is created even when loading fails; its view then has
    status **failed** and the error, and `/reload` retries.
    """
    screen_id = await screens.open(payload.dish_id)
    return ScreenResponse(screen_id=screen_id, view=screens.get(screen_id).snapshot())


@router.get("/{screen_id}", response_model=FoodDetailsView)
async def get_screen(engine: OrderCompositionService = Depends(get_engine)) -> FoodDetailsView:
    """Current view, total included."""
    return engine.snapshot()


@router.post("/{screen_id}/reload", response_model=FoodDetailsView)
async def reload_screen(
    engine: OrderCompositionService = Depends(get_engine),
) -> FoodDetailsView:
    """Retry loading the screen's dish (resets quantities)."""
    await engine.reload()
    return engine.snapshot()


@router.post("/{screen_id}/extras/{extra_id}/increment", response_model=FoodDetailsView)
async def increment_extra(
    extra_id: int, engine: OrderCompositionService = Depends(get_engine)
) -> FoodDetailsView:
    engine.increment_extra(extra_id)
    return engine.snapshot()


@router.post("/{screen_id}/extras/{extra_id}/decrement", response_model=FoodDetailsView)
async def decrement_extra(
    extra_id: int, engine: OrderCompositionService = Depends(get_engine)
) -> FoodDetailsView:
    engine.decrement_extra(extra_id)
    return engine.snapshot()


@router.post("/{screen_id}/quantity/increment", response_model=FoodDetailsView)
async def increment_food(engine: OrderCompositionService = Depends(get_engine)) -> FoodDetailsView:
    engine.increment_food()
    return engine.snapshot()


@router.post("/{screen_id}/quantity/decrement", response_model=FoodDetailsView)
async def decrement_food(engine: OrderCompositionService = Depends(get_engine)) -> FoodDetailsView:
    engine.decrement_food()
    return engine.snapshot()


@router.post("/{screen_id}/favorite/toggle", response_model=FoodDetailsView)
async def toggle_favorite(
    engine: OrderCompositionService = Depends(get_engine),
) -> FoodDetailsView:
    """Add to / remove from favorites. A failed registry write returns 502."""
    await engine.toggle_favorite()
    return engine.snapshot()


@router.post("/{screen_id}/finish", response_model=FinishOrderResponse)
async def finish_order(
    engine: OrderCompositionService = Depends(get_engine),
) -> FinishOrderResponse:
    """Confirm the order; it is only sent when order submission is enabled."""
    return await engine.finish_order()


@router.delete("/{screen_id}", status_code=status.HTTP_204_NO_CONTENT)
async def close_screen(
    screen_id: str, screens: ScreenRegistry = Depends(get_screen_registry)
) -> Response:
    screens.close(screen_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
