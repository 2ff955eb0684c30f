"""Pydantic schemas for the food details screen API."""

from decimal import Decimal
from typing import List, Optional

from pydantic import BaseModel, Field, field_serializer

from domain.enums import FavoriteState, LoadStatus
from domain.schemas.order_schemas import OrderReceipt, OrderRequest


class ExtraView(BaseModel):
    """Extra row rendered under "Adicionais"."""

    id: int
    name: str
    value: Decimal
    quantity: int

    @field_serializer("value", when_used="json")
    def serialize_value(self, value: Decimal) -> float:
        return float(value)


class FoodDetailsView(BaseModel):
    """Read-only snapshot handed to the presentation layer after every change."""

    status: LoadStatus
    dish_id: Optional[int] = None
    name: Optional[str] = None
    description: Optional[str] = None
    image_url: Optional[str] = None
    formatted_price: Optional[str] = None
    extras: List[ExtraView] = []
    quantity: Optional[int] = None
    is_favorite: bool = False
    favorite_state: FavoriteState = FavoriteState.NOT_FAVORITE
    favorite_icon: str = FavoriteState.NOT_FAVORITE.icon_name
    favorite_pending: bool = False
    total: Optional[str] = None
    error: Optional[dict] = None


class OpenScreenRequest(BaseModel):
    """Request body for opening a food details screen."""

    dish_id: int = Field(ge=1)


class ScreenResponse(BaseModel):
    """A screen id with its current view."""

    screen_id: str
    view: FoodDetailsView


class FinishOrderResponse(BaseModel):
    """Outcome of the confirm button."""

    submitted: bool
    order: OrderRequest
    receipt: Optional[OrderReceipt] = None
