"""Favorite registry adapter: persisted set of favorite dishes.
"""

import logging

import httpx

from adapters.http_adapter import raise_for_status, send
from app.exceptions import RegistryError
from domain.schemas.catalog_schemas import DishRecord

logger = logging.getLogger("gorestaurant.favorites")


class FavoriteRegistryClient:
    """Client for POST /favorites and DELETE /favorites/{id}."""

    def __init__(self, client: httpx.AsyncClient):
        self.client = client

    async def add(self, dish: DishRecord) -> None:
        """Store the whole dish record as a favorite."""
        response = await send(
            self.client,
            "POST",
            "/favorites",
            RegistryError,
            json=dish.model_dump(mode="json"),
        )
        raise_for_status(response, RegistryError)
        logger.info("Favorite added: %s", dish.id)

    async def remove(self, dish_id: int) -> None:
        response = await send(self.client, "DELETE", f"/favorites/{dish_id}", RegistryError)
        raise_for_status(response, RegistryError)
        logger.info("Favorite removed: %s", dish_id)
