"""
Food details mappers.
Turns the engine's load state into the read-only view rendered by clients.
"""

from typing import Callable
from decimal import Decimal

from domain.models.load_state import LoadState
from domain.models.order_composition import OrderComposition
from domain.schemas.food_details_schemas import ExtraView, FoodDetailsView
from domain.schemas.order_schemas import OrderExtraLine, OrderRequest


class FoodDetailsMapper:
    """Mapper for food details transformations."""

    @staticmethod
    def to_view(
        state: LoadState,
        formatter: Callable[[Decimal], str],
        favorite_pending: bool = False,
    ) -> FoodDetailsView:
        """
        Convert a LoadState to the FoodDetailsView DTO.

        Args:
            state: current load state of the screen
            formatter: price formatter used for the total
            favorite_pending: whether a favorite write is in flight

        Returns:
            FoodDetailsView; dish fields are empty unless the state is ready
        """
        composition = state.composition
        if composition is None:
            return FoodDetailsView(
                status=state.status,
                dish_id=state.dish_id,
                error=state.error.to_dict() if state.error is not None else None,
            )

        dish = composition.dish
        favorite_state = composition.favorite_state
        return FoodDetailsView(
            status=state.status,
            dish_id=dish.id,
            name=dish.name,
            description=dish.description,
            image_url=dish.image_url,
            formatted_price=composition.formatted_price,
            extras=[
                ExtraView(id=e.id, name=e.name, value=e.value, quantity=e.quantity)
                for e in composition.extras
            ],
            quantity=composition.quantity,
            is_favorite=composition.is_favorite,
            favorite_state=favorite_state,
            favorite_icon=favorite_state.icon_name,
            favorite_pending=favorite_pending,
            total=formatter(composition.total()),
        )

    @staticmethod
    def to_order_request(
        composition: OrderComposition, formatter: Callable[[Decimal], str]
    ) -> OrderRequest:
        """Build the order payload; only extras with a positive quantity are sent."""
        dish = composition.dish
        total = composition.total()
        return OrderRequest(
            product_id=dish.id,
            name=dish.name,
            description=dish.description,
            image_url=dish.image_url,
            price=dish.price,
            quantity=composition.quantity,
            extras=[
                OrderExtraLine(
                    extra_id=e.id, name=e.name, quantity=e.quantity, value=e.value
                )
                for e in composition.chosen_extras()
            ],
            extras_total=composition.extras_total(),
            unit_total=composition.unit_total(),
            total=total,
            formatted_total=formatter(total),
        )
