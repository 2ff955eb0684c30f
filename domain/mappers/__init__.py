"""
Domain mappers package.
Handles transformation between engine state and DTOs (Data Transfer Objects).
"""

from domain.mappers.food_details_mapper import FoodDetailsMapper

__all__ = ["FoodDetailsMapper"]
