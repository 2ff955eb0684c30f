"""Pydantic schemas for finished orders sent to POST /orders."""

from decimal import Decimal
from typing import List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_serializer


class OrderExtraLine(BaseModel):
    """Extra chosen with a positive quantity."""

    extra_id: int
    name: str
    quantity: int = Field(gt=0)
    value: Decimal

    @field_serializer("value", when_used="json")
    def serialize_value(self, value: Decimal) -> float:
        return float(value)


class OrderRequest(BaseModel):
    """Payload for one finished dish order."""

    product_id: int
    name: str
    description: str = ""
    image_url: str = ""
    price: Decimal
    quantity: int = Field(ge=1)
    extras: List[OrderExtraLine] = []
    extras_total: Decimal
    unit_total: Decimal
    total: Decimal
    formatted_total: str

    @field_serializer("price", "extras_total", "unit_total", "total", when_used="json")
    def serialize_amount(self, value: Decimal) -> float:
        return float(value)


class OrderReceipt(BaseModel):
    """Acknowledgement returned by the order service."""

    model_config = ConfigDict(extra="allow")

    id: Union[int, str]
    status: Optional[str] = None
