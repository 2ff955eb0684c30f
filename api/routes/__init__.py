"""API routes package"""

from . import food_details, health

__all__ = ["food_details", "health"]
