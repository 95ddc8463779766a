# catalog/domain/schemas.py
from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field, field_serializer


class ProductRead(BaseModel):
    """Schema dla produktu (response)."""

    id: int
    name: str
    price: Decimal = Field(..., ge=0)
    is_premium: bool = Field(False, alias="isPremium")

    model_config = ConfigDict(from_attributes=True, populate_by_name=True)

    # w JSON cena ma byc liczba, nie stringiem
    @field_serializer("price", when_used="json")
    def serialize_price(self, price: Decimal) -> float:
        return float(price)


class HealthOut(BaseModel):
    """Schema dla health checka (response)."""

    status: str
    products: int
