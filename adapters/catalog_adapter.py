"""Catalog adapter: dish records and favorite status reads.
"""

from typing import Any
import logging

import httpx

from adapters.http_adapter import raise_for_status, send
from app.exceptions import NetworkError, NotFoundError
from domain.schemas.catalog_schemas import DishRecord

logger = logging.getLogger("gorestaurant.catalog")


def is_present(value: Any) -> bool:
    """Favorite lookups count any non-empty answer as "is favorite"."""
    return value is not None and value is not False and value != "" and value != 0


class CatalogClient:
    """Client for GET /foods/{id} and GET /favorites/{id}."""

    def __init__(self, client: httpx.AsyncClient):
        self.client = client

    async def get_dish(self, dish_id: int) -> DishRecord:
        """Fetch a dish with its extras.

        Raises:
            NotFoundError: the catalog does not know the id
            NetworkError: transport failure or malformed/unexpected response
        """
        response = await send(self.client, "GET", f"/foods/{dish_id}", NetworkError)
        if response.status_code == 404:
            raise NotFoundError(f"Dish {dish_id} not found", details={"dish_id": dish_id})
        raise_for_status(response, NetworkError)

        try:
            dish = DishRecord.model_validate(response.json())
        except ValueError as exc:
            raise NetworkError(
                f"Malformed dish record for {dish_id}", details={"dish_id": dish_id}
            ) from exc
        logger.debug(f"Dish loaded: {dish.id} with {len(dish.extras)} extras")
        return dish

    async def get_favorite_status(self, dish_id: int) -> bool:
        """Whether the dish is in the favorites list (a 404 means it is not)."""
        response = await send(self.client, "GET", f"/favorites/{dish_id}", NetworkError)
        if response.status_code == 404:
            return False
        raise_for_status(response, NetworkError)

        if not response.content:
            return False
        try:
            payload = response.json()
        except ValueError as exc:
            raise NetworkError(
                f"Malformed favorite status for {dish_id}", details={"dish_id": dish_id}
            ) from exc
        return is_present(payload)
