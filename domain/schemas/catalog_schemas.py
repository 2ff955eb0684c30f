"""Pydantic schemas for catalog records (dishes and their extras)."""

from decimal import Decimal
from typing import Tuple

from pydantic import BaseModel, ConfigDict, Field, field_serializer


class ExtraRecord(BaseModel):
    """Optional add-on offered with a dish."""

    model_config = ConfigDict(frozen=True)

    id: int
    name: str
    value: Decimal = Field(ge=0)

    @field_serializer("value", when_used="json")
    def serialize_value(self, value: Decimal) -> float:
        return float(value)


class DishRecord(BaseModel):
    """Dish as returned by GET /foods/{id}."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    id: int
    name: str
    description: str = ""
    price: Decimal = Field(ge=0)
    image_url: str = ""
    extras: Tuple[ExtraRecord, ...] = ()

    @field_serializer("price", when_used="json")
    def serialize_price(self, value: Decimal) -> float:
        return float(value)
