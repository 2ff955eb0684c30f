"""Order submission adapter.
"""

import logging

import httpx

from adapters.http_adapter import raise_for_status, send
from app.exceptions import OrderSubmissionError
from domain.schemas.order_schemas import OrderReceipt, OrderRequest

logger = logging.getLogger("gorestaurant.orders")


class OrderSubmissionClient:
    """Client for POST /orders."""

    def __init__(self, client: httpx.AsyncClient):
        self.client = client

    async def submit(self, order: OrderRequest) -> OrderReceipt:
        """Submit one finished dish order.

        Raises:
            OrderSubmissionError: transport failure, HTTP error or unreadable receipt
        """
        response = await send(
            self.client,
            "POST",
            "/orders",
            OrderSubmissionError,
            json=order.model_dump(mode="json"),
        )
        raise_for_status(response, OrderSubmissionError)
        try:
            receipt = OrderReceipt.model_validate(response.json())
        except ValueError as exc:
            raise OrderSubmissionError("Malformed order receipt") from exc
        logger.info("Order submitted: %s for product %s", receipt.id, order.product_id)
        return receipt
