from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field


class ProductModel(BaseModel):
    """Rekord produktu trzymany w pamieci, niezmienny po utworzeniu."""

    model_config = ConfigDict(frozen=True)

    id: int = Field(..., gt=0)
    name: str = Field(..., min_length=1)
    price: Decimal = Field(..., ge=0)
    is_premium: bool = False
