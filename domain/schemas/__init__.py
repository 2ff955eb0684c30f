"""
Domain schemas package - Pydantic models for validation.
"""

from domain.schemas.catalog_schemas import DishRecord, ExtraRecord
from domain.schemas.order_schemas import OrderExtraLine, OrderRequest, OrderReceipt
from domain.schemas.food_details_schemas import (
    ExtraView,
    FoodDetailsView,
    OpenScreenRequest,
    ScreenResponse,
    FinishOrderResponse,
)

__all__ = [
    # Catalog schemas
    "DishRecord",
    "ExtraRecord",
    # Order schemas
    "OrderExtraLine",
    "OrderRequest",
    "OrderReceipt",
    # Screen schemas
    "ExtraView",
    "FoodDetailsView",
    "OpenScreenRequest",
    "ScreenResponse",
    "FinishOrderResponse",
]
