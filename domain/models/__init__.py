"""
Domain models package - immutable order state for the food details screen.
"""

from domain.models.order_composition import OrderComposition, SelectedExtra
from domain.models.load_state import LoadState

__all__ = [
    "OrderComposition",
    "SelectedExtra",
    "LoadState",
]
