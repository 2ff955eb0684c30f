"""
Order composition for a single dish: the dish snapshot, per-extra quantities,
dish quantity and favorite flag.

Compositions are immutable. Every mutation returns a new instance so the
engine can swap its state in one assignment, and totals are always derived
from the current instance instead of being stored.
"""

from decimal import Decimal
from typing import List, Tuple

from pydantic import BaseModel, ConfigDict, Field, model_validator

from domain.enums import FavoriteState
from domain.schemas.catalog_schemas import DishRecord, ExtraRecord

ZERO = Decimal("0")


class SelectedExtra(BaseModel):
    """An extra together with the quantity chosen by the user."""

    model_config = ConfigDict(frozen=True)

    id: int
    name: str
    value: Decimal = Field(ge=0)
    quantity: int = Field(default=0, ge=0)

    @classmethod
    def from_record(cls, record: ExtraRecord) -> "SelectedExtra":
        return cls(id=record.id, name=record.name, value=record.value, quantity=0)

    @property
    def line_total(self) -> Decimal:
        return self.value * self.quantity


class OrderComposition(BaseModel):
    """Selection state for one food details screen."""

    model_config = ConfigDict(frozen=True)

    dish: DishRecord
    formatted_price: str
    extras: Tuple[SelectedExtra, ...] = ()
    quantity: int = Field(default=1, ge=1)
    is_favorite: bool = False

    @model_validator(mode="after")
    def check_extras_match_dish(self) -> "OrderComposition":
        """One entry per extra offered by the dish, in catalog order."""
        offered = [extra.id for extra in self.dish.extras]
        selected = [extra.id for extra in self.extras]
        if len(set(offered)) != len(offered):
            raise ValueError(f"dish {self.dish.id} lists duplicate extra ids")
        if selected != offered:
            raise ValueError(
                f"extras {selected} do not match the extras offered by dish {self.dish.id}"
            )
        return self

    @classmethod
    def start(cls, dish: DishRecord, is_favorite: bool, formatted_price: str) -> "OrderComposition":
        """Fresh composition: one dish, no extras chosen."""
        return cls(
            dish=dish,
            formatted_price=formatted_price,
            extras=tuple(SelectedExtra.from_record(extra) for extra in dish.extras),
            quantity=1,
            is_favorite=is_favorite,
        )

    # ------------------ Extras ------------------

    def find_extra(self, extra_id: int):
        for extra in self.extras:
            if extra.id == extra_id:
                return extra
        return None

    def _with_extra_quantity(self, extra_id: int, delta: int) -> "OrderComposition":
        extras = tuple(
            extra.model_copy(update={"quantity": extra.quantity + delta})
            if extra.id == extra_id
            else extra
            for extra in self.extras
        )
        return self.model_copy(update={"extras": extras})

    def with_extra_incremented(self, extra_id: int) -> "OrderComposition":
        if self.find_extra(extra_id) is None:
            return self
        return self._with_extra_quantity(extra_id, 1)

    def with_extra_decremented(self, extra_id: int) -> "OrderComposition":
        extra = self.find_extra(extra_id)
        if extra is None or extra.quantity == 0:
            return self
        return self._with_extra_quantity(extra_id, -1)

    def chosen_extras(self) -> List[SelectedExtra]:
        return [extra for extra in self.extras if extra.quantity > 0]

    # ------------------ Dish quantity ------------------

    def with_food_incremented(self) -> "OrderComposition":
        return self.model_copy(update={"quantity": self.quantity + 1})

    def with_food_decremented(self) -> "OrderComposition":
        if self.quantity == 1:
            return self
        return self.model_copy(update={"quantity": self.quantity - 1})

    # ------------------ Favorite ------------------

    def with_favorite(self, is_favorite: bool) -> "OrderComposition":
        return self.model_copy(update={"is_favorite": is_favorite})

    @property
    def favorite_state(self) -> FavoriteState:
        return FavoriteState.from_flag(self.is_favorite)

    # ------------------ Pricing ------------------

    def extras_total(self) -> Decimal:
        """Sum of quantity x value over all extras."""
        return sum((extra.line_total for extra in self.extras), ZERO)

    def unit_total(self) -> Decimal:
        """Price of one dish with its chosen extras."""
        return self.dish.price + self.extras_total()

    def total(self) -> Decimal:
        return self.unit_total() * self.quantity
