"""
Order composition engine for the food details screen.

Owns the dish snapshot, the extras with their quantities, the dish quantity
and the favorite flag of one screen. All state lives in an immutable
OrderComposition held by a LoadState; each operation swaps in a new value.
"""

from decimal import Decimal
from typing import Callable, Dict, List, Optional

import anyio

from adapters.catalog_adapter import CatalogClient
from adapters.favorites_adapter import FavoriteRegistryClient
from adapters.orders_adapter import OrderSubmissionClient
from app.config import FavoriteTogglePolicy, settings
from app.exceptions import (
    AppError,
    CompositionNotReadyError,
    LoadError,
    LoadSupersededError,
    RegistryError,
)
from core.base.base_service import BaseService
from core.utils.formatting import format_value
from domain.enums import FavoriteState
from domain.mappers.food_details_mapper import FoodDetailsMapper
from domain.models.load_state import LoadState
from domain.models.order_composition import OrderComposition
from domain.schemas.food_details_schemas import FinishOrderResponse, FoodDetailsView


class OrderCompositionService(BaseService):
    """Engine behind one food details screen."""

    def __init__(
        self,
        catalog: CatalogClient,
        favorites: FavoriteRegistryClient,
        orders: Optional[OrderSubmissionClient] = None,
        formatter: Callable[[Decimal], str] = format_value,
        favorite_policy: Optional[FavoriteTogglePolicy] = None,
    ):
        super().__init__("gorestaurant.order_composition")
        self.catalog = catalog
        self.favorites = favorites
        self.orders = orders
        self.formatter = formatter
        self.favorite_policy = favorite_policy or settings.favorite_toggle_policy
        self._state = LoadState.pending()
        self._favorite_in_flight = False
        self._load_generation = 0

    # ------------------ State ------------------

    @property
    def state(self) -> LoadState:
        return self._state

    @property
    def composition(self) -> OrderComposition:
        """Current composition; raises until a load succeeded."""
        composition = self._state.composition
        if composition is None:
            raise CompositionNotReadyError(
                details={"status": self._state.status.value, "dish_id": self._state.dish_id}
            )
        return composition

    @property
    def favorite_pending(self) -> bool:
        return self._favorite_in_flight

    def _apply(self, composition: OrderComposition) -> OrderComposition:
        self._state = LoadState.ready(composition)
        return composition

    def snapshot(self) -> FoodDetailsView:
        """Read-only view for the presentation layer, total included."""
        return FoodDetailsMapper.to_view(
            self._state, self.formatter, favorite_pending=self._favorite_in_flight
        )

    # ------------------ Initialization ------------------

    async def load(self, dish_id: int) -> OrderComposition:
        """Fetch the dish and its favorite status concurrently and start a fresh order.

        Any previous composition is discarded first, so a failed load leaves
        no state behind. Only the most recently issued load may change the
        state; an older one still in flight is discarded when it completes.

        Raises:
            LoadError: either read failed or the dish record is inconsistent
            LoadSupersededError: another load was issued while this one ran
        """
        self._load_generation += 1
        generation = self._load_generation
        self._state = LoadState.pending(dish_id)
        self.log_info("Loading dish", dish_id=dish_id, generation=generation)

        results: Dict[str, object] = {}
        failures: List[AppError] = []

        async def fetch(key: str, call) -> None:
            try:
                results[key] = await call(dish_id)
            except AppError as exc:
                failures.append(exc)

        async with anyio.create_task_group() as tg:
            tg.start_soon(fetch, "dish", self.catalog.get_dish)
            tg.start_soon(fetch, "favorite", self.catalog.get_favorite_status)

        # No suspension point between this check and the state change below.
        if generation != self._load_generation:
            self.log_warning(
                "Stale load discarded",
                dish_id=dish_id,
                generation=generation,
                current=self._load_generation,
            )
            error = LoadSupersededError(
                details={"dish_id": dish_id, "current_dish_id": self._state.dish_id}
            )
            if failures:
                raise error from failures[0]
            raise error

        if failures:
            cause = failures[0]
            raise self._fail(dish_id, f"Could not load dish {dish_id}: {cause}", cause) from cause

        dish = results["dish"]
        try:
            composition = OrderComposition.start(
                dish=dish,
                is_favorite=bool(results["favorite"]),
                formatted_price=self.formatter(dish.price),
            )
        except ValueError as exc:
            raise self._fail(dish_id, f"Dish {dish_id} has an invalid extras list", exc) from exc

        self.log_info(
            "Dish ready",
            dish_id=dish_id,
            extras=len(composition.extras),
            favorite=composition.is_favorite,
        )
        return self._apply(composition)

    def _fail(self, dish_id: int, message: str, cause: Exception) -> LoadError:
        details = {"dish_id": dish_id}
        if isinstance(cause, AppError):
            details["cause"] = cause.code
        error = LoadError(message, details=details)
        self._state = LoadState.failed(dish_id, error)
        self.log_error("Dish load failed", dish_id=dish_id, error=cause)
        return error

    async def reload(self) -> OrderComposition:
        """Retry the last requested dish."""
        dish_id = self._state.dish_id
        if dish_id is None:
            raise CompositionNotReadyError("No dish was requested yet")
        return await self.load(dish_id)

    # ------------------ Extras ------------------

    def increment_extra(self, extra_id: int) -> OrderComposition:
        composition = self._apply(self.composition.with_extra_incremented(extra_id))
        self._log_extra("Extra incremented", composition, extra_id)
        return composition

    def decrement_extra(self, extra_id: int) -> OrderComposition:
        """Remove one unit of an extra; stays at 0 once there."""
        composition = self._apply(self.composition.with_extra_decremented(extra_id))
        self._log_extra("Extra decremented", composition, extra_id)
        return composition

    def _log_extra(self, message: str, composition: OrderComposition, extra_id: int) -> None:
        extra = composition.find_extra(extra_id)
        self.log_debug(
            message,
            dish_id=composition.dish.id,
            extra_id=extra_id,
            quantity=extra.quantity if extra is not None else None,
        )

    # ------------------ Dish quantity ------------------

    def increment_food(self) -> OrderComposition:
        composition = self._apply(self.composition.with_food_incremented())
        self.log_debug(
            "Dish quantity changed", dish_id=composition.dish.id, quantity=composition.quantity
        )
        return composition

    def decrement_food(self) -> OrderComposition:
        """Remove one dish; never below 1."""
        composition = self._apply(self.composition.with_food_decremented())
        self.log_debug(
            "Dish quantity changed", dish_id=composition.dish.id, quantity=composition.quantity
        )
        return composition

    # ------------------ Total ------------------

    @property
    def total_amount(self) -> Decimal:
        return self.composition.total()

    @property
    def total(self) -> str:
        """Formatted total, derived from the current composition on every read."""
        return self.formatter(self.total_amount)

    # ------------------ Favorite ------------------

    @property
    def favorite_state(self) -> FavoriteState:
        return self.composition.favorite_state

    async def toggle_favorite(self) -> bool:
        """Add the dish to, or remove it from, the favorites and return the new flag.

        With the confirmed policy the flag only flips after the registry
        accepted the write; a failed write raises RegistryError and leaves the
        flag as it was. The optimistic policy flips regardless of the outcome.
        A toggle issued while another one is awaiting the registry is ignored.
        """
        composition = self.composition
        if self._favorite_in_flight:
            self.log_warning("Favorite toggle ignored, write in flight", dish_id=composition.dish.id)
            return composition.is_favorite

        target = not composition.is_favorite
        self._favorite_in_flight = True
        try:
            if self.favorite_policy == FavoriteTogglePolicy.OPTIMISTIC:
                try:
                    await self._write_favorite(composition)
                except RegistryError as exc:
                    self.log_warning(
                        "Favorite write failed, flag flipped anyway",
                        dish_id=composition.dish.id,
                        error=exc,
                    )
            else:
                await self._write_favorite(composition)
        finally:
            self._favorite_in_flight = False

        return self._set_favorite(composition.dish.id, target)

    async def _write_favorite(self, composition: OrderComposition) -> None:
        if composition.is_favorite:
            await self.favorites.remove(composition.dish.id)
        else:
            await self.favorites.add(composition.dish)

    def _set_favorite(self, dish_id: int, is_favorite: bool) -> bool:
        # Quantities may have changed while the write was awaited.
        current = self._state.composition
        if current is None or current.dish.id != dish_id:
            self.log_warning("Dish changed during favorite write", dish_id=dish_id)
            return is_favorite
        self._apply(current.with_favorite(is_favorite))
        self.log_info("Favorite updated", dish_id=dish_id, favorite=is_favorite)
        return is_favorite

    # ------------------ Finish order ------------------

    async def finish_order(self) -> FinishOrderResponse:
        """Confirm the order.

        Builds the order payload (dish, extras with a positive quantity,
        quantity, totals). It is only sent when an order submission client is
        configured; OrderSubmissionError propagates from a failed submission.
        """
        order = FoodDetailsMapper.to_order_request(self.composition, self.formatter)
        if self.orders is None:
            self.log_info("Order confirmed, submission disabled", dish_id=order.product_id)
            return FinishOrderResponse(submitted=False, order=order)

        receipt = await self.orders.submit(order)
        self.log_info("Order submitted", dish_id=order.product_id, order_id=receipt.id)
        return FinishOrderResponse(submitted=True, order=order, receipt=receipt)
