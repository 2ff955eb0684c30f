"""Services package - Business logic layer"""

from services.order_composition_service import OrderCompositionService
from services.screen_registry import ScreenRegistry

__all__ = [
    "OrderCompositionService",
    "ScreenRegistry",
]
