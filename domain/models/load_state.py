"""Two-phase initialization result of a food details screen."""

from typing import Optional

from pydantic import BaseModel, ConfigDict

from app.exceptions import LoadError
from domain.enums import LoadStatus
from domain.models.order_composition import OrderComposition


class LoadState(BaseModel):
    """Pending | Ready(composition) | Failed(error)."""

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    status: LoadStatus
    dish_id: Optional[int] = None
    composition: Optional[OrderComposition] = None
    error: Optional[LoadError] = None

    @classmethod
    def pending(cls, dish_id: Optional[int] = None) -> "LoadState":
        return cls(status=LoadStatus.PENDING, dish_id=dish_id)

    @classmethod
    def ready(cls, composition: OrderComposition) -> "LoadState":
        return cls(
            status=LoadStatus.READY,
            dish_id=composition.dish.id,
            composition=composition,
        )

    @classmethod
    def failed(cls, dish_id: int, error: LoadError) -> "LoadState":
        return cls(status=LoadStatus.FAILED, dish_id=dish_id, error=error)

    @property
    def is_ready(self) -> bool:
        return self.status == LoadStatus.READY
