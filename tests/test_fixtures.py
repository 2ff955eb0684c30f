"""
Shared test fixtures and utilities for the food details test suite.

This module contains in-memory stand-ins for the catalog, favorites and
orders endpoints, realistic dish records, and a helper that builds engines wired to them.
"""

from typing import List, Optional

from app.exceptions import NetworkError, NotFoundError, OrderSubmissionError, RegistryError
from core.utils.formatting import format_value
from domain.schemas.catalog_schemas import DishRecord
from domain.schemas.order_schemas import OrderReceipt, OrderRequest
from services.order_composition_service import OrderCompositionService


def plain_format(amount) -> str:
    """Formatter without currency symbol: 28 -> '28.00'."""
    return format_value(amount, symbol="", decimal_sep=".", thousands_sep=",")


# Realistic dishes as served by GET /foods/{id}
REALISTIC_DISHES = {
    "simple": {
        "id": 1,
        "name": "Ao molho",
        "description": "Macarrão ao molho branco, fughi e cheiro verde das montanhas.",
        "price": 10.00,
        "image_url": "https://storage.example.com/food1.png",
        "extras": [{"id": 1, "name": "Bacon", "value": 2.00}],
    },
    "veggie": {
        "id": 2,
        "name": "Veggie",
        "description": "Macarrão com pimentão, ervilha e ervas finas colhidas no himalaia.",
        "price": 21.90,
        "image_url": "https://storage.example.com/food2.png",
        "extras": [
            {"id": 2, "name": "Ervilha", "value": 1.50},
            {"id": 3, "name": "Queijo", "value": 3.25},
            {"id": 4, "name": "Cogumelo", "value": 2.75},
        ],
    },
    "plain": {
        "id": 3,
        "name": "A la Camarón",
        "description": "Macarrão com vegetais de primeira linha e camarão dos 7 mares.",
        "price": 25.00,
        "image_url": "https://storage.example.com/food3.png",
        "extras": [],
    },
}


def make_dish(profile: str = "simple", **overrides) -> DishRecord:
    """
    Build a DishRecord from one of the realistic profiles.

    Args:
        profile: key of REALISTIC_DISHES
        **overrides: fields replacing the profile values
    """
    data = dict(REALISTIC_DISHES[profile])
    data.update(overrides)
    return DishRecord.model_validate(data)


class FakeCatalogClient:
    """In-memory catalog: dishes by id plus the favorite ids."""

    def __init__(
        self,
        dishes: Optional[List[DishRecord]] = None,
        favorite_ids: Optional[set] = None,
        dish_error: Optional[Exception] = None,
        favorite_error: Optional[Exception] = None,
    ):
        self.dishes = {d.id: d for d in (dishes if dishes is not None else [make_dish()])}
        self.favorite_ids = set(favorite_ids or ())
        self.dish_error = dish_error
        self.favorite_error = favorite_error
        self.calls: List[tuple] = []

    async def get_dish(self, dish_id: int) -> DishRecord:
        self.calls.append(("get_dish", dish_id))
        if self.dish_error is not None:
            raise self.dish_error
        if dish_id not in self.dishes:
            raise NotFoundError(f"Dish {dish_id} not found")
        return self.dishes[dish_id]

    async def get_favorite_status(self, dish_id: int) -> bool:
        self.calls.append(("get_favorite_status", dish_id))
        if self.favorite_error is not None:
            raise self.favorite_error
        return dish_id in self.favorite_ids


class FakeFavoriteRegistry:
    """Records add/remove calls; ``fail`` makes every write raise RegistryError."""

    def __init__(self, fail: bool = False):
        self.fail = fail
        self.calls: List[tuple] = []

    async def add(self, dish: DishRecord) -> None:
        self.calls.append(("add", dish.id))
        if self.fail:
            raise RegistryError("POST /favorites returned HTTP 500")

    async def remove(self, dish_id: int) -> None:
        self.calls.append(("remove", dish_id))
        if self.fail:
            raise RegistryError(f"DELETE /favorites/{dish_id} returned HTTP 500")


class FakeOrderClient:
    """Collects submitted orders and answers with sequential receipt ids."""

    def __init__(self, fail: bool = False):
        self.fail = fail
        self.submitted: List[OrderRequest] = []

    async def submit(self, order: OrderRequest) -> OrderReceipt:
        if self.fail:
            raise OrderSubmissionError("POST /orders returned HTTP 503")
        self.submitted.append(order)
        return OrderReceipt(id=len(self.submitted), status="received")


def make_engine(
    catalog: Optional[FakeCatalogClient] = None,
    favorites: Optional[FakeFavoriteRegistry] = None,
    orders: Optional[FakeOrderClient] = None,
    favorite_policy=None,
) -> OrderCompositionService:
    """Engine over fakes, formatting totals without a currency symbol."""
    return OrderCompositionService(
        catalog=catalog or FakeCatalogClient(),
        favorites=favorites or FakeFavoriteRegistry(),
        orders=orders,
        formatter=plain_format,
        favorite_policy=favorite_policy,
    )


def unreachable_catalog() -> FakeCatalogClient:
    """Catalog whose every read fails at the transport level."""
    error = NetworkError("GET /foods failed: connection refused")
    return FakeCatalogClient(dish_error=error, favorite_error=error)

